"""TestClient fixtures with the service dependencies replaced by AsyncMocks."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from cotitra.adapters.email.memory_adapter import InMemoryEmailAdapter
from cotitra.infrastructure.api import dependencies as deps
from cotitra.main import create_app


@pytest.fixture
def api():
    app = create_app(email_transport=InMemoryEmailAdapter())
    services = {
        "tickets": AsyncMock(),
        "comments": AsyncMock(),
        "users": AsyncMock(),
        "auth": AsyncMock(),
    }

    app.dependency_overrides[deps.get_ticket_service] = lambda: services["tickets"]
    app.dependency_overrides[deps.get_comment_service] = lambda: services["comments"]
    app.dependency_overrides[deps.get_user_service] = lambda: services["users"]
    app.dependency_overrides[deps.get_auth_service] = lambda: services["auth"]

    client = TestClient(app, raise_server_exceptions=False)
    try:
        yield client, services
    finally:
        app.dependency_overrides.clear()
