"""Write model for creating guests.

A guest is created the first time a visitor opens the invitation. Names are
not unique, so creating the same name twice yields two guests.
Returns DTOs instead of ORM models.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from invitation.config.database import async_session_manager
from invitation.guests.dtos import GuestDTO
from invitation.guests.repository.orm_models import Guest
from invitation.validation import require_non_empty, validate_email

logger = logging.getLogger(__name__)


class GuestCreateWriteModel(ABC):
    """Abstract base class for guest creation write operations."""

    @abstractmethod
    async def create_guest(
        self,
        name: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> GuestDTO:
        """Create a new guest. Returns DTO.

        Args:
            name: The name the guest typed on the envelope screen
            email: Optional email address
            phone: Optional phone number
        """
        raise NotImplementedError


class SqlGuestCreateWriteModel(GuestCreateWriteModel):
    """SQL implementation of guest creation write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest(
        self,
        name: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> GuestDTO:
        require_non_empty(name, "name")
        validate_email(email)

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = Guest(name=name, email=email, phone=phone)
            session.add(guest)
            await session.flush()
            await session.refresh(guest)

            logger.info("Guest %s created", guest.id)
            return GuestDTO.from_orm(guest)
