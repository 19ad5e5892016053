from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for persisted records: snake_case in Python, camelCase on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Flashcard(CamelModel):
    front: str = Field(..., description="Prompt side of the card")
    back: str = Field(..., description="Answer side of the card")


class QuizQuestion(CamelModel):
    """A single multiple-choice question."""

    question: str
    options: List[str] = Field(default_factory=list)
    correct_index: int = Field(..., ge=0, description="Index into options of the correct answer")
    explanation: str = ""


class Artifact(CamelModel):
    """Everything the extractor derives from one set of notes."""

    summary: str
    key_points: List[str] = Field(default_factory=list)
    flashcards: List[Flashcard] = Field(default_factory=list)
    quiz_questions: List[QuizQuestion] = Field(default_factory=list)


class ExtractorLimits(BaseModel):
    summary_max_chars: int = Field(default=400, ge=1, description="Summary length before truncation")
    max_key_points: int = Field(default=6, ge=0, description="Key points taken from the sentence pool")
    max_flashcards: int = Field(default=6, ge=0, description="Flashcards taken from the sentence pool")
    max_quiz_questions: int = Field(default=4, ge=0, description="Quiz questions taken from the sentence pool")
