"""Tests for AuthService credential checks."""

import pytest

from cotitra.adapters.crypto.passwords import hash_password
from cotitra.application.services.auth_service import AuthService


@pytest.fixture
def service(user_repo, alice):
    alice.password_hash = hash_password("correct horse")
    return AuthService(user_repo)


@pytest.mark.asyncio
async def test_valid_credentials_return_public_user(service, alice):
    user = await service.validate_credentials("alice@example.org", "correct horse")
    assert user == alice.to_public()


@pytest.mark.asyncio
async def test_email_lookup_ignores_case_and_spaces(service, alice):
    user = await service.validate_credentials("  Alice@Example.ORG ", "correct horse")
    assert user is not None
    assert user.id == alice.id


@pytest.mark.asyncio
async def test_wrong_password_is_rejected(service):
    assert await service.validate_credentials("alice@example.org", "battery staple") is None


@pytest.mark.asyncio
async def test_unknown_email_is_rejected(service):
    assert await service.validate_credentials("nobody@example.org", "correct horse") is None


@pytest.mark.asyncio
async def test_user_without_password_cannot_log_in(service):
    assert await service.validate_credentials("bob@example.org", "") is None
    assert await service.validate_credentials("bob@example.org", "anything") is None
