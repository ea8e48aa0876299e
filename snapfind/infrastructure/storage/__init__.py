from .object_storage import ObjectStorageService
from .url_helpers import (
    create_storage_reference,
    extract_file_name_from_url,
    extract_file_path_from_url,
)

__all__ = [
    "ObjectStorageService",
    "create_storage_reference",
    "extract_file_name_from_url",
    "extract_file_path_from_url",
]
