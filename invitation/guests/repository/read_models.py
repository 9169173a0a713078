import abc

from sqlalchemy import select

from invitation.config.database import async_session_manager
from invitation.guests.dtos import GuestDTO, GuestWithRSVPDTO, RSVPDTO
from invitation.guests.repository.orm_models import RSVP, Guest


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guest_by_name(self, name: str) -> GuestDTO | None:
        """
        Find a guest by exact name (case and whitespace sensitive).
        Returns one match when several guests share the name.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_guests(self) -> list[GuestWithRSVPDTO]:
        """Every guest with their RSVP attached, or None when they have not responded."""
        raise NotImplementedError


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_rsvp_by_guest(self, guest_id: int) -> RSVPDTO | None:
        """RSVP for the guest, or None. Unknown guest ids also give None."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of guest read model."""

    async def get_guest_by_name(self, name: str) -> GuestDTO | None:
        async with async_session_manager() as session:
            stmt = select(Guest).where(Guest.name == name).order_by(Guest.id).limit(1)
            result = await session.execute(stmt)
            guest = result.scalar_one_or_none()

            if not guest:
                return None

            return GuestDTO.from_orm(guest)

    async def get_guests(self) -> list[GuestWithRSVPDTO]:
        async with async_session_manager() as session:
            stmt = (
                select(Guest, RSVP)
                .outerjoin(RSVP, Guest.id == RSVP.guest_id)
                .order_by(Guest.id)
            )
            result = await session.execute(stmt)

            return [
                GuestWithRSVPDTO(
                    id=guest.id,
                    name=guest.name,
                    email=guest.email,
                    phone=guest.phone,
                    created_at=guest.created_at,
                    rsvp=RSVPDTO.from_orm(rsvp) if rsvp else None,
                )
                for guest, rsvp in result.all()
            ]


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of RSVP read model."""

    async def get_rsvp_by_guest(self, guest_id: int) -> RSVPDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(select(RSVP).where(RSVP.guest_id == guest_id))
            rsvp = result.scalar_one_or_none()

            if not rsvp:
                return None

            return RSVPDTO.from_orm(rsvp)
