from fastapi import APIRouter, Depends

from invitation.guests.repository.read_models import RSVPReadModel, SqlRSVPReadModel
from invitation.guests.schemas import RSVPResponse
from invitation.guests.urls import GUEST_RSVP_URL

router = APIRouter()


def get_rsvp_read_model() -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRSVPReadModel()


@router.get(GUEST_RSVP_URL, response_model=RSVPResponse | None)
async def get_rsvp_by_guest(
    guest_id: int,
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPResponse | None:
    """
    Get the RSVP of a guest, used to prefill the form for a returning visitor.
    Returns null when the guest has not responded or does not exist.
    """
    rsvp = await read_model.get_rsvp_by_guest(guest_id)

    if not rsvp:
        return None

    return RSVPResponse.model_validate(rsvp)
