from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from invitation.errors import InvitationValidationError
from invitation.guests.dtos import GuestNotFoundError, RSVPAlreadyExistsError
from invitation.guests.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel
from invitation.guests.schemas import RSVPResponse
from invitation.guests.urls import RSVPS_URL
from invitation.validation import MAX_NUMBER_OF_GUESTS, MIN_NUMBER_OF_GUESTS

router = APIRouter()


class CreateRSVPRequest(BaseModel):
    guest_id: int
    will_attend: bool
    number_of_guests: int = Field(default=1, ge=MIN_NUMBER_OF_GUESTS, le=MAX_NUMBER_OF_GUESTS)
    message: str | None = None


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(RSVPS_URL, response_model=RSVPResponse)
async def create_rsvp(
    rsvp_data: CreateRSVPRequest,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPResponse:
    """
    Submit a guest's first RSVP.
    A guest can respond only once; later changes go through the update endpoint.
    """
    try:
        rsvp = await write_model.create_rsvp(
            guest_id=rsvp_data.guest_id,
            will_attend=rsvp_data.will_attend,
            number_of_guests=rsvp_data.number_of_guests,
            message=rsvp_data.message,
        )
    except (GuestNotFoundError, InvitationValidationError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RSVPAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return RSVPResponse.model_validate(rsvp)
