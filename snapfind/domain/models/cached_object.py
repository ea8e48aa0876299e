# Standard library imports
import secrets
import string
import time
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

_BASE36 = string.digits + string.ascii_lowercase


def new_local_id() -> str:
    """Locally minted id: ``<epoch-ms>_<9 base36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{int(time.time() * 1000)}_{suffix}"


@dataclass
class CachedObject:
    """
    Denormalized copy of an Object kept in the on-device cache.

    Every entry is tagged with its owner. The cache is not authoritative:
    entries written offline are replaced wholesale on the next sync.
    ``created_at`` stays an ISO 8601 string because the blob is plain JSON.
    """
    id: str
    object_name: str
    image_url: str
    user_id: str
    picture_id: Optional[str] = None
    x_position: Optional[float] = None
    y_position: Optional[float] = None
    has_ai_coordinates: bool = False
    deleted: bool = False
    created_at: Optional[str] = None

    def dedupe_key(self) -> tuple:
        return (self.image_url, self.object_name, self.user_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CachedObject":
        """Build an entry from a stored dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values.setdefault("id", new_local_id())
        values.setdefault("object_name", "")
        values.setdefault("image_url", "")
        values.setdefault("user_id", "")
        return cls(**values)
