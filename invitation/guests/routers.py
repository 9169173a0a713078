from fastapi import APIRouter

from .features.create_guest.router import router as create_guest_router
from .features.create_rsvp.router import router as create_rsvp_router
from .features.get_guest_by_name.router import router as get_guest_by_name_router
from .features.get_rsvp_by_guest.router import router as get_rsvp_by_guest_router
from .features.list_guests.router import router as list_guests_router
from .features.update_rsvp.router import router as update_rsvp_router

router = APIRouter()

router.include_router(create_guest_router)
router.include_router(get_guest_by_name_router)
router.include_router(list_guests_router)
router.include_router(create_rsvp_router)
router.include_router(update_rsvp_router)
router.include_router(get_rsvp_by_guest_router)
