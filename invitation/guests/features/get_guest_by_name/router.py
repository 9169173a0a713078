from fastapi import APIRouter, Depends, Query

from invitation.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from invitation.guests.schemas import GuestResponse
from invitation.guests.urls import GUEST_BY_NAME_URL

router = APIRouter()


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(GUEST_BY_NAME_URL, response_model=GuestResponse | None)
async def get_guest_by_name(
    name: str = Query(...),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestResponse | None:
    """
    Re-identify a returning visitor by the name they typed.
    Exact match only; returns null when nobody has that name.
    This is not authentication, no secret is checked.
    """
    guest = await read_model.get_guest_by_name(name)

    if not guest:
        return None

    return GuestResponse.model_validate(guest)
