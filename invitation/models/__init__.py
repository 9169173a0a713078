from .base import Base, BaseModel, CreatedAt, TimeStamp

__all__ = [
    "Base",
    "BaseModel",
    "CreatedAt",
    "TimeStamp",
]
