from .user import User
from .picture import Picture
from .detected_object import DetectedObject, normalize_object_name
from .object_with_picture import ObjectWithPicture
from .cached_object import CachedObject, new_local_id
from .detection import Detection

__all__ = [
    "User",
    "Picture",
    "DetectedObject",
    "normalize_object_name",
    "ObjectWithPicture",
    "CachedObject",
    "new_local_id",
    "Detection",
]
