"""In-memory models for testing - no database required."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from itertools import count

from invitation.guests.dtos import (
    RSVPDTO,
    GuestDTO,
    GuestNotFoundError,
    GuestWithRSVPDTO,
    RSVPAlreadyExistsError,
    RSVPNotFoundError,
    RSVPUpdateDTO,
)
from invitation.guests.features.create_guest.write_model import GuestCreateWriteModel
from invitation.guests.repository.read_models import GuestReadModel, RSVPReadModel
from invitation.guests.repository.write_models import RSVPWriteModel
from invitation.validation import (
    require_non_empty,
    validate_email,
    validate_number_of_guests,
    validate_rsvp_changes,
)


class InMemoryClock:
    """Clock that moves forward one second on every read."""

    def __init__(self, start: datetime | None = None):
        self._now = start or datetime(2026, 8, 15, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class InMemoryGuestStore(GuestCreateWriteModel, GuestReadModel, RSVPReadModel, RSVPWriteModel):
    """Guest directory and RSVP ledger kept in dicts."""

    def __init__(self, clock: InMemoryClock | None = None):
        self.guests: dict[int, GuestDTO] = {}
        self.rsvps: dict[int, RSVPDTO] = {}
        self._clock = clock or InMemoryClock()
        self._guest_ids = count(1)
        self._rsvp_ids = count(1)

    async def create_guest(
        self,
        name: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> GuestDTO:
        require_non_empty(name, "name")
        validate_email(email)
        guest = GuestDTO(
            id=next(self._guest_ids),
            name=name,
            email=email,
            phone=phone,
            created_at=self._clock(),
        )
        self.guests[guest.id] = guest
        return guest

    async def get_guest_by_name(self, name: str) -> GuestDTO | None:
        return next((guest for guest in self.guests.values() if guest.name == name), None)

    async def get_guests(self) -> list[GuestWithRSVPDTO]:
        return [
            GuestWithRSVPDTO(
                id=guest.id,
                name=guest.name,
                email=guest.email,
                phone=guest.phone,
                created_at=guest.created_at,
                rsvp=await self.get_rsvp_by_guest(guest.id),
            )
            for guest in self.guests.values()
        ]

    async def get_rsvp_by_guest(self, guest_id: int) -> RSVPDTO | None:
        return next((rsvp for rsvp in self.rsvps.values() if rsvp.guest_id == guest_id), None)

    async def create_rsvp(
        self,
        guest_id: int,
        will_attend: bool,
        number_of_guests: int = 1,
        message: str | None = None,
    ) -> RSVPDTO:
        validate_number_of_guests(number_of_guests)
        if guest_id not in self.guests:
            raise GuestNotFoundError(guest_id)
        if await self.get_rsvp_by_guest(guest_id):
            raise RSVPAlreadyExistsError(guest_id)

        now = self._clock()
        rsvp = RSVPDTO(
            id=next(self._rsvp_ids),
            guest_id=guest_id,
            will_attend=will_attend,
            number_of_guests=number_of_guests,
            message=message,
            created_at=now,
            updated_at=now,
        )
        self.rsvps[rsvp.id] = rsvp
        return rsvp

    async def update_rsvp(self, rsvp_id: int, update: RSVPUpdateDTO) -> RSVPDTO:
        rsvp = self.rsvps.get(rsvp_id)
        if rsvp is None:
            raise RSVPNotFoundError(rsvp_id)

        changes = validate_rsvp_changes(update.changes())

        updated = replace(rsvp, **changes, updated_at=self._clock())
        self.rsvps[rsvp_id] = updated
        return updated
