from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from invitation.errors import InvitationValidationError
from invitation.wedding.repository.write_models import (
    SqlWeddingPhotoWriteModel,
    WeddingPhotoWriteModel,
)
from invitation.wedding.schemas import WeddingPhotoResponse
from invitation.wedding.urls import WEDDING_PHOTOS_URL

router = APIRouter()


class CreateWeddingPhotoRequest(BaseModel):
    url: str
    alt_text: str | None = None
    is_main_photo: bool = False
    gallery_order: int | None = None


def get_wedding_photo_write_model() -> WeddingPhotoWriteModel:
    """Dependency to get wedding photo write model instance."""
    return SqlWeddingPhotoWriteModel()


@router.post(WEDDING_PHOTOS_URL, response_model=WeddingPhotoResponse)
async def create_wedding_photo(
    photo_data: CreateWeddingPhotoRequest,
    write_model: WeddingPhotoWriteModel = Depends(get_wedding_photo_write_model),
) -> WeddingPhotoResponse:
    """Add a photo by URL. Uploads are not handled here, the image must already be hosted."""
    try:
        photo = await write_model.create_wedding_photo(
            url=photo_data.url,
            alt_text=photo_data.alt_text,
            is_main_photo=photo_data.is_main_photo,
            gallery_order=photo_data.gallery_order,
        )
    except InvitationValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return WeddingPhotoResponse.model_validate(photo)
