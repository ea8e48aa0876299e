"""
Unit tests for image upload, display URLs and vision analysis.
"""
from unittest.mock import AsyncMock

import pytest

from snapfind.application.use_cases.detection.analyze_image import AnalyzeImageUseCase
from snapfind.application.use_cases.images import (
    DeleteUserImageUseCase,
    GetDisplayUrlUseCase,
    UploadImageUseCase,
)
from snapfind.core.exceptions import AuthenticationError, ValidationError
from snapfind.domain.models.detection import Detection

KEY = "user-u1/images/snapfind_1.jpg"


@pytest.fixture
def storage():
    service = AsyncMock()
    service.upload_user_image.return_value = KEY
    service.create_signed_url.return_value = "https://signed.example/url"
    return service


class TestUploadImage:
    @pytest.mark.asyncio
    async def test_upload_bytes(self, storage, mock_settings):
        result = await UploadImageUseCase(storage).upload_bytes("u1", b"data", "photo.PNG")

        assert result.image_url == KEY
        assert result.display_url == "https://signed.example/url"
        storage.upload_user_image.assert_awaited_once_with("u1", b"data", "PNG")
        storage.create_signed_url.assert_awaited_once_with(KEY, 86400)

    @pytest.mark.asyncio
    async def test_empty_data(self, storage):
        with pytest.raises(ValidationError):
            await UploadImageUseCase(storage).upload_bytes("u1", b"")
        storage.upload_user_image.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_owner(self, storage):
        with pytest.raises(AuthenticationError):
            await UploadImageUseCase(storage).upload_bytes(None, b"data")

    @pytest.mark.asyncio
    async def test_upload_from_file(self, storage, mock_settings, tmp_path):
        path = tmp_path / "shot.jpg"
        path.write_bytes(b"jpeg-bytes")

        await UploadImageUseCase(storage).execute("u1", path)

        storage.upload_user_image.assert_awaited_once_with("u1", b"jpeg-bytes", "jpg")

    @pytest.mark.asyncio
    async def test_missing_file(self, storage, tmp_path):
        with pytest.raises(ValidationError):
            await UploadImageUseCase(storage).execute("u1", tmp_path / "nope.jpg")


class TestDisplayUrl:
    @pytest.mark.asyncio
    async def test_full_url_passes_through(self, storage):
        url = "https://example.com/cat.jpg"
        result = await GetDisplayUrlUseCase(storage).execute(url)
        assert result.display_url == url
        storage.create_signed_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_reference_is_signed(self, storage, mock_settings):
        result = await GetDisplayUrlUseCase(storage).execute(KEY)
        assert result.display_url == "https://signed.example/url"


class TestAnalyzeImage:
    @pytest.mark.asyncio
    async def test_signs_reference_for_analysis(self, storage, mock_settings):
        vision = AsyncMock()
        vision.analyze_image_url.return_value = [Detection("cup", 10.0, 20.0)]

        result = await AnalyzeImageUseCase(storage, vision).execute(KEY)

        storage.create_signed_url.assert_awaited_once_with(KEY, 3600)
        vision.analyze_image_url.assert_awaited_once_with("https://signed.example/url")
        assert result.image_url == KEY
        assert [(d.name, d.x, d.y) for d in result.detections] == [("cup", 10.0, 20.0)]

    @pytest.mark.asyncio
    async def test_foreign_url_sent_unsigned(self, storage, mock_settings):
        vision = AsyncMock()
        vision.analyze_image_url.return_value = []

        await AnalyzeImageUseCase(storage, vision).execute("https://example.com/cat.jpg")

        storage.create_signed_url.assert_not_called()
        vision.analyze_image_url.assert_awaited_once_with("https://example.com/cat.jpg")


class TestDeleteUserImage:
    @pytest.mark.asyncio
    async def test_deletes_by_file_name(self, storage):
        result = await DeleteUserImageUseCase(storage).execute("u1", KEY)

        assert result == "snapfind_1.jpg"
        storage.delete_user_image.assert_awaited_once_with("u1", "snapfind_1.jpg")

    @pytest.mark.asyncio
    async def test_requires_owner(self, storage):
        with pytest.raises(AuthenticationError):
            await DeleteUserImageUseCase(storage).execute(None, KEY)
