GUESTS_URL = "/api/v1/guests"
GUEST_BY_NAME_URL = "/api/v1/guests/by-name"
GUEST_RSVP_URL = "/api/v1/guests/{guest_id}/rsvp"
RSVPS_URL = "/api/v1/rsvps"
RSVP_URL = "/api/v1/rsvps/{rsvp_id}"
