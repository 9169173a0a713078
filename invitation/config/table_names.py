from enum import Enum


class TableNames(str, Enum):
    GUESTS = "guests"
    RSVPS = "rsvps"
    WEDDING_PHOTOS = "wedding_photos"
    WEDDING_INFO = "wedding_info"
