from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RSVPResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    guest_id: int
    will_attend: bool
    number_of_guests: int
    message: str | None
    created_at: datetime
    updated_at: datetime


class GuestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None
    phone: str | None
    created_at: datetime


class GuestWithRSVPResponse(GuestResponse):
    rsvp: RSVPResponse | None = None
