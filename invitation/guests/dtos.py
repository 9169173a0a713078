from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from invitation.errors import ConflictError, NotFoundError, ReferentialError
from invitation.partial_update import UNSET, PartialUpdate, Unset

if TYPE_CHECKING:
    from invitation.guests.repository.orm_models import RSVP, Guest


class GuestNotFoundError(ReferentialError):
    """Raised when an RSVP names a guest that does not exist."""

    def __init__(self, guest_id: int) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest with id {guest_id} not found")


class RSVPAlreadyExistsError(ConflictError):
    """Raised when a guest who already responded submits a second RSVP."""

    def __init__(self, guest_id: int) -> None:
        self.guest_id = guest_id
        super().__init__(f"RSVP already exists for guest {guest_id}")


class RSVPNotFoundError(NotFoundError):
    """Raised when updating an RSVP id that does not exist."""

    def __init__(self, rsvp_id: int) -> None:
        self.rsvp_id = rsvp_id
        super().__init__(f"RSVP with id {rsvp_id} not found")


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data."""

    id: int
    name: str
    created_at: datetime
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_orm(cls, guest: "Guest") -> "GuestDTO":
        return cls(
            id=guest.id,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
            created_at=guest.created_at,
        )


@dataclass(frozen=True)
class RSVPDTO:
    """DTO for a guest's attendance response."""

    id: int
    guest_id: int
    will_attend: bool
    number_of_guests: int
    created_at: datetime
    updated_at: datetime
    message: str | None = None

    @classmethod
    def from_orm(cls, rsvp: "RSVP") -> "RSVPDTO":
        return cls(
            id=rsvp.id,
            guest_id=rsvp.guest_id,
            will_attend=rsvp.will_attend,
            number_of_guests=rsvp.number_of_guests,
            message=rsvp.message,
            created_at=rsvp.created_at,
            updated_at=rsvp.updated_at,
        )


@dataclass(frozen=True)
class GuestWithRSVPDTO:
    """Guest row left-joined with its RSVP, if any."""

    id: int
    name: str
    created_at: datetime
    email: str | None = None
    phone: str | None = None
    rsvp: RSVPDTO | None = None


@dataclass(frozen=True)
class RSVPUpdateDTO(PartialUpdate):
    """Partial RSVP update.

    A field left as UNSET keeps the stored value. ``message=None`` clears the
    message; ``will_attend`` and ``number_of_guests`` are never nullable.
    """

    will_attend: bool | Unset = UNSET
    number_of_guests: int | Unset = UNSET
    message: str | None | Unset = UNSET
