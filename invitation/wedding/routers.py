from fastapi import APIRouter

from .features.create_wedding_photo.router import router as create_wedding_photo_router
from .features.get_wedding_info.router import router as get_wedding_info_router
from .features.get_wedding_photos.router import router as get_wedding_photos_router
from .features.update_wedding_info.router import router as update_wedding_info_router

router = APIRouter()

router.include_router(get_wedding_info_router)
router.include_router(update_wedding_info_router)
router.include_router(get_wedding_photos_router)
router.include_router(create_wedding_photo_router)
