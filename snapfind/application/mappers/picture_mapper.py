from ...domain.models.picture import Picture
from ..dto.picture_dto import PictureResponse, PictureWithCountResponse


def picture_to_response(picture: Picture) -> PictureResponse:
    return PictureResponse(
        id=picture.id or "",
        image_url=picture.image_url,
        picture_name=picture.picture_name,
        description=picture.description,
        created_at=picture.created_at,
        updated_at=picture.updated_at,
    )


def picture_with_count(picture: Picture, object_count: int) -> PictureWithCountResponse:
    return PictureWithCountResponse(
        **picture_to_response(picture).model_dump(),
        object_count=object_count,
        has_objects=object_count > 0,
    )
