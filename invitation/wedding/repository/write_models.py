"""Wedding profile and photo write models. Return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from invitation.config.database import async_session_manager
from invitation.errors import InvitationValidationError
from invitation.models.base import utcnow
from invitation.validation import validate_url
from invitation.wedding.dtos import (
    WEDDING_INFO_ID,
    WeddingInfoAlreadyExistsError,
    WeddingInfoCreateDTO,
    WeddingInfoDTO,
    WeddingInfoNotFoundError,
    WeddingInfoUpdateDTO,
    WeddingPhotoDTO,
)
from invitation.wedding.repository.orm_models import WeddingInfo, WeddingPhoto

logger = logging.getLogger(__name__)


class WeddingInfoWriteModel(ABC):
    @abstractmethod
    async def create_wedding_info(self, info: WeddingInfoCreateDTO) -> WeddingInfoDTO:
        """Seed the wedding profile. Raises WeddingInfoAlreadyExistsError if it exists."""
        raise NotImplementedError

    @abstractmethod
    async def update_wedding_info(self, update: WeddingInfoUpdateDTO) -> WeddingInfoDTO:
        """
        Apply the supplied fields to the wedding profile and refresh updated_at.
        Raises WeddingInfoNotFoundError before the profile is seeded.
        """
        raise NotImplementedError


class WeddingPhotoWriteModel(ABC):
    @abstractmethod
    async def create_wedding_photo(
        self,
        url: str,
        alt_text: str | None = None,
        is_main_photo: bool = False,
        gallery_order: int | None = None,
    ) -> WeddingPhotoDTO:
        """Add a photo referenced by URL. Several photos may be flagged main."""
        raise NotImplementedError


class SqlWeddingInfoWriteModel(WeddingInfoWriteModel):
    """SQL implementation of wedding profile write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_wedding_info(self, info: WeddingInfoCreateDTO) -> WeddingInfoDTO:
        if info.reception_maps_url is not None:
            validate_url(info.reception_maps_url, "reception_maps_url")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if await self._get(session) is not None:
                logger.warning("Wedding information seed refused: record already exists")
                raise WeddingInfoAlreadyExistsError()

            now = utcnow()
            wedding_info = WeddingInfo(
                id=WEDDING_INFO_ID,
                created_at=now,
                updated_at=now,
                **asdict(info),
            )
            session.add(wedding_info)
            await session.flush()
            await session.refresh(wedding_info)

            logger.info("Wedding information seeded")
            return WeddingInfoDTO.from_orm(wedding_info)

    async def update_wedding_info(self, update: WeddingInfoUpdateDTO) -> WeddingInfoDTO:
        changes = update.changes()
        for field_name, value in changes.items():
            if field_name == "reception_maps_url":
                if value is not None:
                    validate_url(value, field_name)
            elif value is None:
                raise InvitationValidationError(f"{field_name} cannot be null")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            wedding_info = await self._get(session)
            if not wedding_info:
                logger.warning("Wedding information update refused: record not seeded")
                raise WeddingInfoNotFoundError()

            for field_name, value in changes.items():
                setattr(wedding_info, field_name, value)
            wedding_info.updated_at = utcnow()

            await session.flush()
            await session.refresh(wedding_info)

            logger.info("Wedding information updated (%s)", ", ".join(changes) or "no field changes")
            return WeddingInfoDTO.from_orm(wedding_info)

    @staticmethod
    async def _get(session) -> WeddingInfo | None:
        result = await session.execute(select(WeddingInfo).where(WeddingInfo.id == WEDDING_INFO_ID))
        return result.scalar_one_or_none()


class SqlWeddingPhotoWriteModel(WeddingPhotoWriteModel):
    """SQL implementation of wedding photo write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_wedding_photo(
        self,
        url: str,
        alt_text: str | None = None,
        is_main_photo: bool = False,
        gallery_order: int | None = None,
    ) -> WeddingPhotoDTO:
        validate_url(url)

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            photo = WeddingPhoto(
                url=url,
                alt_text=alt_text,
                is_main_photo=is_main_photo,
                gallery_order=gallery_order,
            )
            session.add(photo)
            await session.flush()
            await session.refresh(photo)

            logger.info("Wedding photo %s added (main=%s)", photo.id, is_main_photo)
            return WeddingPhotoDTO.from_orm(photo)
