"""Constants for domain model field names"""

from .user_fields import UserFields
from .picture_fields import PictureFields
from .object_fields import ObjectFields

__all__ = [
    "UserFields",
    "PictureFields",
    "ObjectFields",
]
