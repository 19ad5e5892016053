"""studypacks package.

Turns free-text notes into local study packs:
- extractor: heuristic summary, key points, flashcards and quiz from notes
- packs: the pack collection with identity, ordering, deletion and persistence
"""
from __future__ import annotations

from .extractor import Artifact, Flashcard, QuizQuestion, generate
from .packs import (
    GenerationError,
    JsonFileStorage,
    MemoryStorage,
    Pack,
    PackStore,
    ValidationError,
)

__all__ = [
    "__version__",
    "Artifact",
    "Flashcard",
    "QuizQuestion",
    "generate",
    "Pack",
    "PackStore",
    "JsonFileStorage",
    "MemoryStorage",
    "ValidationError",
    "GenerationError",
]

__version__ = "0.1.0"
