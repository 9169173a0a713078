from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WeddingPhotoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    alt_text: str | None
    is_main_photo: bool
    gallery_order: int | None
    created_at: datetime


class WeddingInfoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
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
    reception_maps_url: str | None
    bank_name: str
    account_holder: str
    account_number: str
    rsvp_message: str
    rsvp_deadline: datetime
    co_invitation_message: str
    quran_verse: str
    created_at: datetime
    updated_at: datetime
