"""RSVP write model - creates and updates RSVPs, returns DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from invitation.config.database import async_session_manager
from invitation.guests.dtos import (
    RSVPDTO,
    GuestNotFoundError,
    RSVPAlreadyExistsError,
    RSVPNotFoundError,
    RSVPUpdateDTO,
)
from invitation.guests.repository.orm_models import RSVP, Guest
from invitation.models.base import utcnow
from invitation.validation import validate_number_of_guests, validate_rsvp_changes

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RSVPWriteModel(ABC):
    @abstractmethod
    async def create_rsvp(
        self,
        guest_id: int,
        will_attend: bool,
        number_of_guests: int = 1,
        message: str | None = None,
    ) -> RSVPDTO:
        """
        Record a guest's first response.
        Raises GuestNotFoundError for an unknown guest and
        RSVPAlreadyExistsError when the guest already responded.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_rsvp(self, rsvp_id: int, update: RSVPUpdateDTO) -> RSVPDTO:
        """
        Apply the supplied fields to an existing RSVP and refresh updated_at.
        Raises RSVPNotFoundError for an unknown id.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """Write operations for RSVP. Returns DTOs, never ORM models."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_rsvp(
        self,
        guest_id: int,
        will_attend: bool,
        number_of_guests: int = 1,
        message: str | None = None,
    ) -> RSVPDTO:
        validate_number_of_guests(number_of_guests)

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if not await self._guest_exists(session, guest_id):
                logger.warning("RSVP refused: guest %s does not exist", guest_id)
                raise GuestNotFoundError(guest_id)

            now = utcnow()
            # The unique constraint on guest_id decides; concurrent submits cannot both insert
            stmt = (
                self._insert(session)
                .values(
                    guest_id=guest_id,
                    will_attend=will_attend,
                    number_of_guests=number_of_guests,
                    message=message,
                    created_at=now,
                    updated_at=now,
                )
                .on_conflict_do_nothing(index_elements=[RSVP.guest_id])
                .returning(RSVP)
            )
            result = await session.execute(stmt)
            rsvp = result.scalar_one_or_none()

            if rsvp is None:
                logger.warning("RSVP refused: guest %s already responded", guest_id)
                raise RSVPAlreadyExistsError(guest_id)

            logger.info("RSVP %s recorded for guest %s (attending=%s)", rsvp.id, guest_id, will_attend)
            return RSVPDTO.from_orm(rsvp)

    async def update_rsvp(self, rsvp_id: int, update: RSVPUpdateDTO) -> RSVPDTO:
        changes = validate_rsvp_changes(update.changes())

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(RSVP).where(RSVP.id == rsvp_id))
            rsvp = result.scalar_one_or_none()

            if not rsvp:
                logger.warning("RSVP update refused: RSVP %s does not exist", rsvp_id)
                raise RSVPNotFoundError(rsvp_id)

            for field_name, value in changes.items():
                setattr(rsvp, field_name, value)
            rsvp.updated_at = utcnow()

            await session.flush()
            await session.refresh(rsvp)

            logger.info("RSVP %s updated (%s)", rsvp_id, ", ".join(changes) or "no field changes")
            return RSVPDTO.from_orm(rsvp)

    @staticmethod
    async def _guest_exists(session, guest_id: int) -> bool:
        result = await session.execute(select(Guest.id).where(Guest.id == guest_id))
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _insert(session):
        """INSERT construct of the bound dialect, which carries ON CONFLICT support."""
        dialect_name = session.get_bind().dialect.name
        try:
            return _DIALECT_INSERTS[dialect_name](RSVP)
        except KeyError:
            raise RuntimeError(f"RSVP creation is not supported on {dialect_name}")
