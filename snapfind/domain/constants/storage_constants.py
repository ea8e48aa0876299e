"""
Shared constants for on-device persistence and object storage.

Used by the local cache, the storage service and the upload use case.
Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# On-device key-value store
# -----------------------------------------------------------------------------
OBJECTS_CACHE_KEY = "snapfind_objects"
LAST_SYNC_KEY = "snapfind_last_sync"

# Spin interval of the local cache write mutex
CACHE_MUTEX_SPIN_SECONDS = 0.01

# -----------------------------------------------------------------------------
# Object storage layout: user-<id>/images/snapfind_<epoch-ms>.<ext>
# -----------------------------------------------------------------------------
USER_FOLDER_TEMPLATE = "user-{user_id}/images"
IMAGE_FILE_PREFIX = "snapfind_"
DEFAULT_IMAGE_EXTENSION = "jpg"
ALLOWED_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp"})
IMAGE_CONTENT_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
}
USER_IMAGES_LIST_LIMIT = 100
