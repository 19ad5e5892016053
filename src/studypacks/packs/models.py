"""
Pack record and collection (de)serialization.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Sequence

from pydantic import Field, TypeAdapter, field_serializer, field_validator

from ..extractor.models import Flashcard, QuizQuestion, CamelModel


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class Pack(CamelModel):
    """One study unit, manual or generated."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    notes: str = ""
    summary: str = ""
    key_points: List[str] = Field(default_factory=list)
    flashcards: List[Flashcard] = Field(default_factory=list)
    quiz_questions: List[QuizQuestion] = Field(default_factory=list)
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)


_PACK_LIST = TypeAdapter(List[Pack])
_RECORD_LIST = TypeAdapter(List[Any])


def dump_packs(packs: Sequence[Pack]) -> str:
    """Serialize packs to a JSON array using the persisted (camelCase) field names."""
    return _PACK_LIST.dump_json(list(packs), by_alias=True).decode("utf-8")


def load_records(raw: str | bytes) -> List[Any]:
    """Parse a JSON array without validating its elements.

    Raises pydantic.ValidationError when the payload is not JSON or not an array.
    """
    return _RECORD_LIST.validate_json(raw)
