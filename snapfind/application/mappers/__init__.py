from .object_mapper import cached_to_response, view_row_to_cached, view_row_to_response
from .picture_mapper import picture_to_response, picture_with_count

__all__ = [
    "cached_to_response",
    "view_row_to_cached",
    "view_row_to_response",
    "picture_to_response",
    "picture_with_count",
]
