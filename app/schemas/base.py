"""Shared pydantic base: snake_case in Python, camelCase on the wire."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    """Stored timestamps are UTC; SQLite returns them without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Every timestamp in a response goes out as UTC with an explicit offset.
UTCDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """
    Accepts either camelCase or snake_case keys on input and always
    serialises with camelCase aliases (FastAPI dumps response models by alias).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Body for mutations that return no entity (logout, deletes)."""

    message: str


class ErrorResponse(CamelModel):
    """Flat error body produced by the exception handlers."""

    message: str
    code: str
