"""
Fixtures for API tests: the app runs with a mocked DI container and a fixed
signed-in user, so no database or storage is touched.
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from snapfind.application.dto.user_dto import UserResponse

CONTROLLER_MODULES = (
    "snapfind.api.v1.auth_controller",
    "snapfind.api.v1.objects_controller",
    "snapfind.api.v1.pictures_controller",
    "snapfind.api.v1.sync_controller",
    "snapfind.api.v1.images_controller",
    "snapfind.api.v1.dependencies",
)


@pytest.fixture
def current_user():
    return UserResponse(id="usr-1", full_name="Test User", email="test@example.com")


@pytest.fixture
def use_cases():
    """Use case class -> AsyncMock; tests register what they need."""
    return {}


@pytest.fixture
def mock_container(use_cases):
    container = MagicMock()
    container.get.side_effect = lambda cls: use_cases.setdefault(cls, AsyncMock(spec=cls))
    return container


@pytest.fixture
def client(mock_container, current_user):
    from snapfind.api.v1.dependencies import get_current_user
    from snapfind.main import app

    app.dependency_overrides[get_current_user] = lambda: current_user
    with ExitStack() as stack:
        for module in CONTROLLER_MODULES:
            stack.enter_context(patch(f"{module}.get_container", return_value=mock_container))
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()
