"""Conversions between remote view rows, cache entries and API DTOs."""
from ...domain.models.cached_object import CachedObject
from ...domain.models.object_with_picture import ObjectWithPicture
from ...utils.datetime_utils import parse_iso, to_iso
from ..dto.object_dto import ObjectResponse


def view_row_to_response(row: ObjectWithPicture) -> ObjectResponse:
    return ObjectResponse(
        id=row.object_id,
        object_name=row.object_name,
        image_url=row.image_url,
        picture_id=row.picture_id,
        picture_name=row.display_picture_name,
        description=row.description,
        x_position=row.x_position,
        y_position=row.y_position,
        has_ai_coordinates=row.has_ai_coordinates,
        created_at=row.created_at,
        source="remote",
    )


def cached_to_response(entry: CachedObject) -> ObjectResponse:
    return ObjectResponse(
        id=entry.id,
        object_name=entry.object_name,
        image_url=entry.image_url,
        picture_id=entry.picture_id,
        x_position=entry.x_position,
        y_position=entry.y_position,
        has_ai_coordinates=entry.has_ai_coordinates,
        created_at=parse_iso(entry.created_at),
        source="local",
    )


def view_row_to_cached(row: ObjectWithPicture) -> CachedObject:
    """Cache entry for a synced row; it keeps the remote object id."""
    return CachedObject(
        id=row.object_id,
        object_name=row.object_name,
        image_url=row.image_url,
        user_id=row.user_id,
        picture_id=row.picture_id,
        x_position=row.x_position,
        y_position=row.y_position,
        has_ai_coordinates=row.has_ai_coordinates,
        deleted=row.deleted,
        created_at=to_iso(row.created_at),
    )
