from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, Field

from invitation.errors import InvitationValidationError
from invitation.guests.features.create_guest.write_model import (
    GuestCreateWriteModel,
    SqlGuestCreateWriteModel,
)
from invitation.guests.schemas import GuestResponse
from invitation.guests.urls import GUESTS_URL

router = APIRouter()


class CreateGuestRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr | None = None
    phone: str | None = None


def get_guest_create_write_model() -> GuestCreateWriteModel:
    """Dependency to get guest creation write model instance."""
    return SqlGuestCreateWriteModel()


@router.post(GUESTS_URL, response_model=GuestResponse)
async def create_guest(
    request: CreateGuestRequest,
    write_model: GuestCreateWriteModel = Depends(get_guest_create_write_model),
) -> GuestResponse:
    """
    Create a guest from the name typed on the envelope screen.
    Names are not unique: the same name twice creates two guests.
    """
    try:
        guest = await write_model.create_guest(
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
    except InvitationValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return GuestResponse.model_validate(guest)
