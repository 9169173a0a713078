from fastapi import APIRouter, Depends

from invitation.guests.features.get_guest_by_name.router import get_guest_read_model
from invitation.guests.repository.read_models import GuestReadModel
from invitation.guests.schemas import GuestWithRSVPResponse
from invitation.guests.urls import GUESTS_URL

router = APIRouter()


@router.get(GUESTS_URL, response_model=list[GuestWithRSVPResponse])
async def get_guests(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestWithRSVPResponse]:
    """List every guest with their RSVP, or null for guests who have not responded."""
    guests = await read_model.get_guests()
    return [GuestWithRSVPResponse.model_validate(guest) for guest in guests]
