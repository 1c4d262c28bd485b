"""Shared schema helpers: timestamp handling and the camelCase response base."""
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def to_naive_utc(value: datetime) -> datetime:
    """Normalize an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into naive UTC

    Accepts a trailing ``Z`` and date-only strings (``2024-02-01``).

    Raises:
        ValueError: If the string is not a valid ISO-8601 value
    """
    return to_naive_utc(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    return to_naive_utc(value).isoformat(timespec="milliseconds") + "Z"


UtcDateTime = Annotated[
    datetime,
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class ResponseModel(BaseModel):
    """Base for structured responses: reads ORM objects, emits data-model (camelCase) field names."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def reject_null(value: Optional[object], field_name: str) -> object:
    """Patch helper: non-nullable fields may be omitted but never set to null."""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
