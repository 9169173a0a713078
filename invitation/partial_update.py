"""Partial-update fields that tell "clear this" (None) apart from "leave it" (UNSET)."""

from dataclasses import fields
from enum import Enum
from typing import Any


class Unset(Enum):
    """Marker for a partial-update field that was not supplied."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET


class PartialUpdate:
    """Mixin for frozen dataclasses whose fields default to UNSET."""

    def changes(self) -> dict[str, Any]:
        """Supplied fields only; an explicit None is kept so it can clear a column."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)  # type: ignore[arg-type]
            if getattr(self, field.name) is not UNSET
        }
