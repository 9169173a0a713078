from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from invitation.errors import ConflictError, NotFoundError
from invitation.partial_update import UNSET, PartialUpdate, Unset

if TYPE_CHECKING:
    from invitation.wedding.repository.orm_models import WeddingInfo, WeddingPhoto

# The wedding profile is a single row with this well-known id
WEDDING_INFO_ID = 1


class WeddingInfoNotFoundError(NotFoundError):
    """Raised when updating the wedding profile before it was seeded."""

    def __init__(self) -> None:
        super().__init__("Wedding information record not found")


class WeddingInfoAlreadyExistsError(ConflictError):
    """Raised when seeding a wedding profile that already exists."""

    def __init__(self) -> None:
        super().__init__("Wedding information record already exists")


@dataclass(frozen=True)
class WeddingPhotoDTO:
    """DTO for a photo referenced by external URL."""

    id: int
    url: str
    is_main_photo: bool
    created_at: datetime
    alt_text: str | None = None
    gallery_order: int | None = None

    @classmethod
    def from_orm(cls, photo: "WeddingPhoto") -> "WeddingPhotoDTO":
        return cls(
            id=photo.id,
            url=photo.url,
            alt_text=photo.alt_text,
            is_main_photo=photo.is_main_photo,
            gallery_order=photo.gallery_order,
            created_at=photo.created_at,
        )


@dataclass(frozen=True)
class WeddingInfoCreateDTO:
    """Every field needed to seed the wedding profile."""

    bride_full_name: str
    bride_nickname: str
    bride_father: str
    bride_mother: str
    groom_full_name: str
    groom_nickname: str
    groom_father: str
    groom_mother: str
    ceremony_date: datetime
    ceremony_time_start: str
    ceremony_time_end: str
    ceremony_location: str
    reception_date: datetime
    reception_time_start: str
    reception_time_end: str
    reception_location: str
    bank_name: str
    account_holder: str
    account_number: str
    rsvp_message: str
    rsvp_deadline: datetime
    co_invitation_message: str
    quran_verse: str
    reception_maps_url: str | None = None


@dataclass(frozen=True)
class WeddingInfoDTO(WeddingInfoCreateDTO):
    """DTO for the stored wedding profile."""

    id: int = WEDDING_INFO_ID
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_orm(cls, info: "WeddingInfo") -> "WeddingInfoDTO":
        return cls(
            id=info.id,
            bride_full_name=info.bride_full_name,
            bride_nickname=info.bride_nickname,
            bride_father=info.bride_father,
            bride_mother=info.bride_mother,
            groom_full_name=info.groom_full_name,
            groom_nickname=info.groom_nickname,
            groom_father=info.groom_father,
            groom_mother=info.groom_mother,
            ceremony_date=info.ceremony_date,
            ceremony_time_start=info.ceremony_time_start,
            ceremony_time_end=info.ceremony_time_end,
            ceremony_location=info.ceremony_location,
            reception_date=info.reception_date,
            reception_time_start=info.reception_time_start,
            reception_time_end=info.reception_time_end,
            reception_location=info.reception_location,
            reception_maps_url=info.reception_maps_url,
            bank_name=info.bank_name,
            account_holder=info.account_holder,
            account_number=info.account_number,
            rsvp_message=info.rsvp_message,
            rsvp_deadline=info.rsvp_deadline,
            co_invitation_message=info.co_invitation_message,
            quran_verse=info.quran_verse,
            created_at=info.created_at,
            updated_at=info.updated_at,
        )


@dataclass(frozen=True)
class WeddingInfoUpdateDTO(PartialUpdate):
    """Partial wedding profile update; UNSET fields keep their stored value.

    Only ``reception_maps_url`` accepts None (clears the link).
    """

    bride_full_name: str | Unset = UNSET
    bride_nickname: str | Unset = UNSET
    bride_father: str | Unset = UNSET
    bride_mother: str | Unset = UNSET
    groom_full_name: str | Unset = UNSET
    groom_nickname: str | Unset = UNSET
    groom_father: str | Unset = UNSET
    groom_mother: str | Unset = UNSET
    ceremony_date: datetime | Unset = UNSET
    ceremony_time_start: str | Unset = UNSET
    ceremony_time_end: str | Unset = UNSET
    ceremony_location: str | Unset = UNSET
    reception_date: datetime | Unset = UNSET
    reception_time_start: str | Unset = UNSET
    reception_time_end: str | Unset = UNSET
    reception_location: str | Unset = UNSET
    reception_maps_url: str | None | Unset = UNSET
    bank_name: str | Unset = UNSET
    account_holder: str | Unset = UNSET
    account_number: str | Unset = UNSET
    rsvp_message: str | Unset = UNSET
    rsvp_deadline: datetime | Unset = UNSET
    co_invitation_message: str | Unset = UNSET
    quran_verse: str | Unset = UNSET
