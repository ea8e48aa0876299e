from .auth_controller import router as auth_router
from .objects_controller import router as objects_router
from .pictures_controller import router as pictures_router
from .sync_controller import router as sync_router
from .images_controller import router as images_router


__all__ = ["auth_router", "objects_router", "pictures_router", "sync_router", "images_router"]
