from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from invitation.errors import InvitationValidationError
from invitation.wedding.dtos import WeddingInfoNotFoundError, WeddingInfoUpdateDTO
from invitation.wedding.repository.write_models import (
    SqlWeddingInfoWriteModel,
    WeddingInfoWriteModel,
)
from invitation.wedding.schemas import WeddingInfoResponse
from invitation.wedding.urls import WEDDING_INFO_URL

router = APIRouter()


class UpdateWeddingInfoRequest(BaseModel):
    """Omitted fields are left unchanged. Only reception_maps_url may be null."""

    bride_full_name: str | None = None
    bride_nickname: str | None = None
    bride_father: str | None = None
    bride_mother: str | None = None
    groom_full_name: str | None = None
    groom_nickname: str | None = None
    groom_father: str | None = None
    groom_mother: str | None = None
    ceremony_date: datetime | None = None
    ceremony_time_start: str | None = None
    ceremony_time_end: str | None = None
    ceremony_location: str | None = None
    reception_date: datetime | None = None
    reception_time_start: str | None = None
    reception_time_end: str | None = None
    reception_location: str | None = None
    reception_maps_url: str | None = None
    bank_name: str | None = None
    account_holder: str | None = None
    account_number: str | None = None
    rsvp_message: str | None = None
    rsvp_deadline: datetime | None = None
    co_invitation_message: str | None = None
    quran_verse: str | None = None

    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info):
        if value is None and info.field_name != "reception_maps_url":
            raise ValueError("may be omitted but not null")
        return value

    def to_dto(self) -> WeddingInfoUpdateDTO:
        return WeddingInfoUpdateDTO(**self.model_dump(exclude_unset=True))


def get_wedding_info_write_model() -> WeddingInfoWriteModel:
    """Dependency to get wedding profile write model instance."""
    return SqlWeddingInfoWriteModel()


@router.patch(WEDDING_INFO_URL, response_model=WeddingInfoResponse)
async def update_wedding_info(
    update_data: UpdateWeddingInfoRequest,
    write_model: WeddingInfoWriteModel = Depends(get_wedding_info_write_model),
) -> WeddingInfoResponse:
    """
    Edit the wedding profile. The profile must already be seeded
    (see the seed-wedding-info CLI command).
    """
    try:
        wedding_info = await write_model.update_wedding_info(update_data.to_dto())
    except WeddingInfoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvitationValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return WeddingInfoResponse.model_validate(wedding_info)
