"""Pytest configuration and shared fixtures."""

import uuid

import pytest

from cotitra.domain.entities.user import User


@pytest.fixture
def alice():
    return User(
        id=str(uuid.uuid4()), first_name="Alice", last_name="Martin", email="alice@example.org"
    )


@pytest.fixture
def bob():
    return User(
        id=str(uuid.uuid4()), first_name="Bob", last_name="Durand", email="bob@example.org"
    )


@pytest.fixture
def unknown_id():
    return str(uuid.uuid4())
