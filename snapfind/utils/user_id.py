"""
Owner id normalization.

Callers hand over whatever they have at hand: an id string, a user record
(dict or object) or something stranger. Every store query needs a plain
string, so everything funnels through safe_user_id().
"""
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

_ID_KEYS = ("id", "user_id", "uid")


def is_valid_uuid(value: Any) -> bool:
    """Whether value is a string shaped like an RFC 4122 UUID."""
    return isinstance(value, str) and bool(_UUID_PATTERN.match(value))


def safe_user_id(user_or_id: Any) -> Optional[str]:
    """
    Extract a usable owner id

    Args:
        user_or_id: An id string, a mapping or object carrying ``id``,
            ``user_id`` or ``uid``, or any other scalar

    Returns:
        The id as a string, or None when nothing usable is present
    """
    if user_or_id is None or user_or_id == "":
        logger.warning("User ID is null or empty")
        return None

    if isinstance(user_or_id, str):
        if not is_valid_uuid(user_or_id):
            # Mongo ObjectIds and test ids are legitimate too
            logger.debug(f"User ID does not match UUID pattern: {user_or_id}")
        return user_or_id

    if isinstance(user_or_id, dict):
        for key in _ID_KEYS:
            if user_or_id.get(key):
                return safe_user_id(user_or_id[key])
        logger.error(f"Unable to extract user ID from mapping: {user_or_id}")
        return None

    if isinstance(user_or_id, (int, float)):
        logger.warning(f"Converting user ID to string: {type(user_or_id).__name__}")
        return str(user_or_id)

    for key in _ID_KEYS:
        value = getattr(user_or_id, key, None)
        if value:
            return safe_user_id(value)

    logger.error(f"Unable to extract user ID from {type(user_or_id).__name__}")
    return None
