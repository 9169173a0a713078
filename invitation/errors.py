"""Error taxonomy shared by the guest, RSVP and wedding models.

Lookups return ``None`` when nothing matches; only writes whose
precondition fails raise one of these.
"""


class InvitationError(Exception):
    """Base class for errors raised by read and write models."""


class InvitationValidationError(InvitationError, ValueError):
    """Raised when input breaks a structural constraint, before any store access."""


class NotFoundError(InvitationError):
    """Raised when a write targets an entity that does not exist."""


class ConflictError(InvitationError):
    """Raised when a write would create a second copy of a unique record."""


class ReferentialError(InvitationError):
    """Raised when a write references another entity that does not exist."""
