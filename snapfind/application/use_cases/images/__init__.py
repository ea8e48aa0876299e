from .upload_image import UploadImageUseCase
from .get_display_url import GetDisplayUrlUseCase
from .list_user_images import ListUserImagesUseCase
from .delete_user_image import DeleteUserImageUseCase

__all__ = [
    "UploadImageUseCase",
    "GetDisplayUrlUseCase",
    "ListUserImagesUseCase",
    "DeleteUserImageUseCase",
]
