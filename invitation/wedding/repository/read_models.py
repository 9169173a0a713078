import abc

from sqlalchemy import select

from invitation.config.database import async_session_manager
from invitation.wedding.dtos import WEDDING_INFO_ID, WeddingInfoDTO, WeddingPhotoDTO
from invitation.wedding.repository.orm_models import WeddingInfo, WeddingPhoto

# main photos first, then explicit gallery order with unordered photos last, then oldest first
PHOTO_ORDERING = (
    WeddingPhoto.is_main_photo.desc(),
    WeddingPhoto.gallery_order.is_(None),
    WeddingPhoto.gallery_order.asc(),
    WeddingPhoto.created_at.asc(),
    WeddingPhoto.id.asc(),
)


class WeddingInfoReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_wedding_info(self) -> WeddingInfoDTO | None:
        """The configured wedding profile, or None before it is seeded."""
        raise NotImplementedError


class WeddingPhotoReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_wedding_photos(self) -> list[WeddingPhotoDTO]:
        """All photos, main photos first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_gallery_photos(self) -> list[WeddingPhotoDTO]:
        """Photos not flagged as main, in gallery order."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_main_wedding_photo(self) -> WeddingPhotoDTO | None:
        """One photo flagged as main, or None."""
        raise NotImplementedError


class SqlWeddingInfoReadModel(WeddingInfoReadModel):
    """SQL implementation of wedding profile read model."""

    async def get_wedding_info(self) -> WeddingInfoDTO | None:
        async with async_session_manager() as session:
            result = await session.execute(
                select(WeddingInfo).where(WeddingInfo.id == WEDDING_INFO_ID)
            )
            info = result.scalar_one_or_none()

            if not info:
                return None

            return WeddingInfoDTO.from_orm(info)


class SqlWeddingPhotoReadModel(WeddingPhotoReadModel):
    """SQL implementation of wedding photo read model."""

    async def get_wedding_photos(self) -> list[WeddingPhotoDTO]:
        async with async_session_manager() as session:
            result = await session.execute(select(WeddingPhoto).order_by(*PHOTO_ORDERING))
            return [WeddingPhotoDTO.from_orm(photo) for photo in result.scalars().all()]

    async def get_gallery_photos(self) -> list[WeddingPhotoDTO]:
        async with async_session_manager() as session:
            stmt = (
                select(WeddingPhoto)
                .where(WeddingPhoto.is_main_photo.is_(False))
                .order_by(*PHOTO_ORDERING)
            )
            result = await session.execute(stmt)
            return [WeddingPhotoDTO.from_orm(photo) for photo in result.scalars().all()]

    async def get_main_wedding_photo(self) -> WeddingPhotoDTO | None:
        async with async_session_manager() as session:
            stmt = (
                select(WeddingPhoto)
                .where(WeddingPhoto.is_main_photo.is_(True))
                .order_by(WeddingPhoto.id)
                .limit(1)
            )
            result = await session.execute(stmt)
            photo = result.scalar_one_or_none()

            if not photo:
                return None

            return WeddingPhotoDTO.from_orm(photo)
