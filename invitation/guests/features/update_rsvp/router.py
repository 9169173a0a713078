from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from invitation.errors import InvitationValidationError
from invitation.guests.dtos import RSVPNotFoundError, RSVPUpdateDTO
from invitation.guests.features.create_rsvp.router import get_rsvp_write_model
from invitation.guests.repository.write_models import RSVPWriteModel
from invitation.guests.schemas import RSVPResponse
from invitation.guests.urls import RSVP_URL
from invitation.validation import MAX_NUMBER_OF_GUESTS, MIN_NUMBER_OF_GUESTS

router = APIRouter()


class UpdateRSVPRequest(BaseModel):
    """Omitted fields are left unchanged; "message": null clears the message."""

    will_attend: bool | None = None
    number_of_guests: int | None = Field(default=None, ge=MIN_NUMBER_OF_GUESTS, le=MAX_NUMBER_OF_GUESTS)
    message: str | None = None

    @field_validator("will_attend", "number_of_guests")
    @classmethod
    def reject_null(cls, value):
        # only runs for supplied values, defaults are not validated
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def to_dto(self) -> RSVPUpdateDTO:
        return RSVPUpdateDTO(**self.model_dump(exclude_unset=True))


@router.patch(RSVP_URL, response_model=RSVPResponse)
async def update_rsvp(
    rsvp_id: int,
    rsvp_data: UpdateRSVPRequest,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPResponse:
    """
    Change an existing RSVP (attendance, party size or message).
    Every call refreshes updated_at, even an empty body, so a guest can reconfirm.
    """
    try:
        rsvp = await write_model.update_rsvp(rsvp_id, rsvp_data.to_dto())
    except RSVPNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvitationValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return RSVPResponse.model_validate(rsvp)
