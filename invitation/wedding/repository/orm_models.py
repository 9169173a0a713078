from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from invitation.config.table_names import TableNames
from invitation.models.base import Base, CreatedAt, TimeStamp
from invitation.wedding.dtos import WEDDING_INFO_ID


class WeddingPhoto(Base, CreatedAt):
    __tablename__ = TableNames.WEDDING_PHOTOS.value

    url: Mapped[str] = mapped_column(Text, nullable=False)
    alt_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    # several photos may be flagged main; readers pick one
    is_main_photo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    gallery_order: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<WeddingPhoto {self.id} {self.url}>"


class WeddingInfo(Base, TimeStamp):
    __tablename__ = TableNames.WEDDING_INFO.value
    __table_args__ = (
        CheckConstraint(f"id = {WEDDING_INFO_ID}", name="ck_wedding_info_singleton"),
    )

    # Bride
    bride_full_name: Mapped[str] = mapped_column(Text, nullable=False)
    bride_nickname: Mapped[str] = mapped_column(Text, nullable=False)
    bride_father: Mapped[str] = mapped_column(Text, nullable=False)
    bride_mother: Mapped[str] = mapped_column(Text, nullable=False)

    # Groom
    groom_full_name: Mapped[str] = mapped_column(Text, nullable=False)
    groom_nickname: Mapped[str] = mapped_column(Text, nullable=False)
    groom_father: Mapped[str] = mapped_column(Text, nullable=False)
    groom_mother: Mapped[str] = mapped_column(Text, nullable=False)

    # Ceremony
    ceremony_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ceremony_time_start: Mapped[str] = mapped_column(Text, nullable=False)
    ceremony_time_end: Mapped[str] = mapped_column(Text, nullable=False)
    ceremony_location: Mapped[str] = mapped_column(Text, nullable=False)

    # Reception
    reception_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    reception_time_start: Mapped[str] = mapped_column(Text, nullable=False)
    reception_time_end: Mapped[str] = mapped_column(Text, nullable=False)
    reception_location: Mapped[str] = mapped_column(Text, nullable=False)
    reception_maps_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Bank transfer gift details, display only
    bank_name: Mapped[str] = mapped_column(Text, nullable=False)
    account_holder: Mapped[str] = mapped_column(Text, nullable=False)
    account_number: Mapped[str] = mapped_column(Text, nullable=False)

    # Invitation copy
    rsvp_message: Mapped[str] = mapped_column(Text, nullable=False)
    rsvp_deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    co_invitation_message: Mapped[str] = mapped_column(Text, nullable=False)
    quran_verse: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<WeddingInfo {self.bride_nickname} & {self.groom_nickname}>"
