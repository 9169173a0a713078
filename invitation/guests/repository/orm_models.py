from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from invitation.config.table_names import TableNames
from invitation.models.base import Base, CreatedAt, TimeStamp
from invitation.validation import MAX_NUMBER_OF_GUESTS, MIN_NUMBER_OF_GUESTS


class Guest(Base, CreatedAt):
    __tablename__ = TableNames.GUESTS.value

    # names are not unique; lookups by name return the lowest id
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Guest {self.id} {self.name}>"


class RSVP(Base, TimeStamp):
    __tablename__ = TableNames.RSVPS.value
    __table_args__ = (
        UniqueConstraint("guest_id", name="uq_rsvps_guest_id"),
        CheckConstraint(
            f"number_of_guests BETWEEN {MIN_NUMBER_OF_GUESTS} AND {MAX_NUMBER_OF_GUESTS}",
            name="ck_rsvps_number_of_guests",
        ),
    )

    guest_id: Mapped[int] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.id"),
        nullable=False,
    )
    will_attend: Mapped[bool] = mapped_column(Boolean, nullable=False)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RSVP {self.id} guest={self.guest_id} attend={self.will_attend}>"
