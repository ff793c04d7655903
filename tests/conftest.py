"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A complete, valid sign-up request body
- A canned AccountRecord returned by use case stand-ins
"""

import pytest

from src.domain.models import AccountRecord


@pytest.fixture
def valid_body() -> dict[str, str]:
    """Sign-up body that passes every presence and confirmation check."""
    return {
        "name": "valid_name",
        "email": "valid_email@email.com",
        "password": "valid_password",
        "passwordConfirmation": "valid_password",
    }


@pytest.fixture
def fake_account() -> AccountRecord:
    """Account record as returned by a use case stand-in."""
    return AccountRecord(
        id="valid_id",
        name="valid",
        email="valid@mail.com",
        password="123123123",
    )
