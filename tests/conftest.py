"""
Shared pytest fixtures for SnapFind tests.
"""
import os
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from snapfind.domain.models.cached_object import CachedObject
from snapfind.infrastructure.local.key_value_store import JsonFileKeyValueStore
from snapfind.infrastructure.local.mutex import BusyWaitMutex
from snapfind.infrastructure.local.object_cache import LocalObjectCache


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_snapfind_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "OPENAI_API_KEY": "",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.openai_api_key = ""
    mock.vision_model = "gpt-4o"
    mock.vision_api_url = "https://vision.test/v1/chat/completions"
    mock.vision_timeout_seconds = 30.0
    mock.daily_picture_limit = 10
    mock.local_timezone = "UTC"
    mock.storage_bucket = "images"
    mock.display_url_ttl_seconds = 86400
    mock.analysis_url_ttl_seconds = 3600

    # Patch at source and at use sites (modules import get_settings at load time)
    targets = [
        "snapfind.core.config.get_settings",
        "snapfind.core.security.get_settings",
        "snapfind.utils.datetime_utils.get_settings",
        "snapfind.infrastructure.storage.url_helpers.get_settings",
        "snapfind.infrastructure.storage.object_storage.get_settings",
        "snapfind.infrastructure.external.vision_client.get_settings",
        "snapfind.application.use_cases.images.upload_image.get_settings",
        "snapfind.application.use_cases.images.get_display_url.get_settings",
        "snapfind.application.use_cases.pictures.check_daily_quota.get_settings",
        "snapfind.application.use_cases.pictures.get_usage_stats.get_settings",
        "snapfind.application.use_cases.detection.analyze_image.get_settings",
    ]
    with ExitStack() as stack:
        for target in targets:
            stack.enter_context(patch(target, return_value=mock))
        yield mock


@pytest.fixture
def cache(tmp_path):
    """LocalObjectCache on a throwaway JSON file."""
    store = JsonFileKeyValueStore(tmp_path / "cache.json")
    return LocalObjectCache(store, BusyWaitMutex(spin_seconds=0.001))


@pytest.fixture
def mock_picture_repo():
    return AsyncMock()


@pytest.fixture
def mock_object_repo():
    return AsyncMock()


@pytest.fixture
def make_entry():
    """Factory for cache entries with sensible defaults."""
    def _make(name="cup", image_url="user-u1/images/snapfind_1.jpg", user_id="u1", **kwargs):
        return CachedObject(
            id=kwargs.pop("id", f"local-{name}-{user_id}"),
            object_name=name,
            image_url=image_url,
            user_id=user_id,
            **kwargs,
        )
    return _make
