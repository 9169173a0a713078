from fastapi import APIRouter, Depends

from invitation.wedding.repository.read_models import (
    SqlWeddingPhotoReadModel,
    WeddingPhotoReadModel,
)
from invitation.wedding.schemas import WeddingPhotoResponse
from invitation.wedding.urls import GALLERY_PHOTOS_URL, MAIN_WEDDING_PHOTO_URL, WEDDING_PHOTOS_URL

router = APIRouter()


def get_wedding_photo_read_model() -> WeddingPhotoReadModel:
    """Dependency to get wedding photo read model instance."""
    return SqlWeddingPhotoReadModel()


@router.get(WEDDING_PHOTOS_URL, response_model=list[WeddingPhotoResponse])
async def get_wedding_photos(
    read_model: WeddingPhotoReadModel = Depends(get_wedding_photo_read_model),
) -> list[WeddingPhotoResponse]:
    """
    All photos: main photos first, then by gallery order with unordered
    photos last, oldest first on ties.
    """
    photos = await read_model.get_wedding_photos()
    return [WeddingPhotoResponse.model_validate(photo) for photo in photos]


@router.get(MAIN_WEDDING_PHOTO_URL, response_model=WeddingPhotoResponse | None)
async def get_main_wedding_photo(
    read_model: WeddingPhotoReadModel = Depends(get_wedding_photo_read_model),
) -> WeddingPhotoResponse | None:
    """The cover photo of the invitation, or null when none is flagged main."""
    photo = await read_model.get_main_wedding_photo()

    if not photo:
        return None

    return WeddingPhotoResponse.model_validate(photo)


@router.get(GALLERY_PHOTOS_URL, response_model=list[WeddingPhotoResponse])
async def get_gallery_photos(
    read_model: WeddingPhotoReadModel = Depends(get_wedding_photo_read_model),
) -> list[WeddingPhotoResponse]:
    """Gallery photos only (main photos excluded), same ordering as the full list."""
    photos = await read_model.get_gallery_photos()
    return [WeddingPhotoResponse.model_validate(photo) for photo in photos]
