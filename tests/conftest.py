"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def make_user_payload():
    """Factory fixture building valid user request payloads.

    Usage:
        payload = make_user_payload()                 # defaults
        payload = make_user_payload(password="abc")   # override a field
    """
    counter = 0  # Counter for unique email/username generation

    def _factory(**overrides) -> dict:
        nonlocal counter
        counter += 1

        payload = {
            "username": f"testuser{counter}",
            "email": f"testuser{counter}@example.com",
            "name": "Test User",
            "password": "TestPass123!",
            "role_id": 1,
            "is_active": True,
        }
        payload.update(overrides)
        return payload

    return _factory
