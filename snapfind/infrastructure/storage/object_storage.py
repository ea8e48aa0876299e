"""S3-compatible object storage for user images (boto3)."""
import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...core.config import get_settings
from ...core.exceptions import StorageServiceError
from ...domain.constants.storage_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    DEFAULT_IMAGE_EXTENSION,
    IMAGE_CONTENT_TYPES,
    IMAGE_FILE_PREFIX,
    USER_FOLDER_TEMPLATE,
    USER_IMAGES_LIST_LIMIT,
)

logger = logging.getLogger(__name__)


def user_folder(user_id: str) -> str:
    return USER_FOLDER_TEMPLATE.format(user_id=user_id)


def normalize_extension(extension: Optional[str]) -> str:
    ext = (extension or "").lower().lstrip(".")
    return ext if ext in ALLOWED_IMAGE_EXTENSIONS else DEFAULT_IMAGE_EXTENSION


class ObjectStorageService:
    """
    Upload, list, delete and sign user images in one bucket.

    boto3 is blocking, every call is pushed to a worker thread.
    """

    def __init__(self, client: Any = None, bucket: Optional[str] = None) -> None:
        settings = get_settings()
        self.bucket = bucket or settings.storage_bucket
        self.client = client if client is not None else self._create_client()

    @staticmethod
    def _create_client() -> Any:
        settings = get_settings()
        session = boto3.session.Session()
        return session.client(
            "s3",
            region_name=settings.storage_region,
            endpoint_url=settings.storage_endpoint_url,
            aws_access_key_id=settings.storage_access_key,
            aws_secret_access_key=settings.storage_secret_key,
            config=Config(signature_version="s3v4"),
        )

    async def upload_user_image(
        self,
        user_id: str,
        data: bytes,
        extension: Optional[str] = None,
    ) -> str:
        """
        Store image bytes under the user's folder.

        Returns:
            The object key, ``user-<id>/images/snapfind_<epoch-ms>.<ext>``
        """
        if not user_id:
            raise StorageServiceError(
                "User ID is required for image upload",
                user_message="Please sign in to upload images.",
            )
        if not data:
            raise StorageServiceError("Image data is empty")

        ext = normalize_extension(extension)
        key = f"{user_folder(user_id)}/{IMAGE_FILE_PREFIX}{int(time.time() * 1000)}.{ext}"
        logger.info(f"Uploading {len(data)} bytes to {key}")

        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=IMAGE_CONTENT_TYPES.get(ext, "image/jpeg"),
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Upload to {key} failed: {e}", exc_info=True)
            raise StorageServiceError(f"Failed to upload image: {e}")
        return key

    async def create_signed_url(self, path: str, expires_in: int) -> str:
        try:
            return await asyncio.to_thread(
                self.client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self.bucket, "Key": path},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error creating signed URL for {path}: {e}")
            raise StorageServiceError(f"Failed to sign {path}: {e}")

    async def list_user_images(self, user_id: str) -> List[Dict[str, Any]]:
        """The user's stored images, newest first, each with a display URL."""
        if not user_id:
            raise StorageServiceError("User ID is required")

        prefix = f"{user_folder(user_id)}/"
        try:
            response = await asyncio.to_thread(
                self.client.list_objects_v2,
                Bucket=self.bucket,
                Prefix=prefix,
                MaxKeys=USER_IMAGES_LIST_LIMIT,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error listing images under {prefix}: {e}")
            raise StorageServiceError(f"Failed to list images: {e}")

        contents = sorted(
            response.get("Contents", []),
            key=lambda obj: obj.get("LastModified") or 0,
            reverse=True,
        )
        ttl = get_settings().display_url_ttl_seconds
        images = []
        for obj in contents:
            key = obj["Key"]
            try:
                url = await self.create_signed_url(key, ttl)
            except StorageServiceError:
                # Listed without a display URL
                url = None
            images.append({
                "name": key.rsplit("/", 1)[-1],
                "path": key,
                "url": url,
                "size": obj.get("Size"),
                "last_modified": obj.get("LastModified"),
            })
        logger.info(f"Found {len(images)} images for user {user_id}")
        return images

    async def delete_user_image(self, user_id: str, file_name: str) -> None:
        if not user_id or not file_name:
            raise StorageServiceError("User ID and file name are required")

        key = f"{user_folder(user_id)}/{file_name}"
        try:
            await asyncio.to_thread(self.client.delete_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error deleting {key}: {e}")
            raise StorageServiceError(f"Failed to delete image: {e}")
        logger.info(f"Deleted image {key}")
