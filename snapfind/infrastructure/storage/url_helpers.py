"""
Storage reference helpers.

Pictures are stored by object key (``user-<id>/images/snapfind_<ms>.jpg``),
never by signed URL, because signed URLs expire and carry a different query
string every time. These helpers turn whatever the client sends back into
that key.
"""
import logging
from typing import Optional
from urllib.parse import unquote, urlparse

from ...core.config import get_settings

logger = logging.getLogger(__name__)

_SIGNED_PATH_MARKER = "/storage/v1/object/sign/"


def _bucket_name(bucket: Optional[str]) -> str:
    return bucket or get_settings().storage_bucket


def extract_file_path_from_url(url: Optional[str], bucket: Optional[str] = None) -> Optional[str]:
    """
    Object key of a signed URL or direct path.

    Plain paths (no protocol) are returned unchanged. For URLs the query
    string is dropped and the bucket prefix removed; both path-style
    (``https://host/<bucket>/<key>``) and virtual-host style
    (``https://<bucket>.host/<key>``) links are understood, as well as
    ``/storage/v1/object/sign/<bucket>/<key>`` links.

    Returns:
        The object key, or None when the URL does not point into the bucket
    """
    if not url:
        return None
    if not url.startswith("http"):
        return url

    bucket = _bucket_name(bucket)
    parsed = urlparse(url)
    path = unquote(parsed.path)

    signed_prefix = f"{_SIGNED_PATH_MARKER}{bucket}/"
    if signed_prefix in path:
        return path.split(signed_prefix, 1)[1] or None

    bucket_prefix = f"/{bucket}/"
    if path.startswith(bucket_prefix):
        return path[len(bucket_prefix):] or None

    if (parsed.hostname or "").startswith(f"{bucket}."):
        return path.lstrip("/") or None

    logger.debug(f"URL does not point into bucket {bucket}: {url[:100]}")
    return None


def create_storage_reference(image_url: str, bucket: Optional[str] = None) -> str:
    """Standardized reference for an image; unrecognized URLs are kept as they are."""
    if not image_url.startswith("http"):
        return image_url
    return extract_file_path_from_url(image_url, bucket) or image_url


def extract_file_name_from_url(url: Optional[str]) -> Optional[str]:
    """Last path segment without query string."""
    if not url:
        return None
    return url.split("/")[-1].split("?")[0] or None
