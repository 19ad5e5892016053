"""
Local, heuristic study-material extraction.

This package provides functionality for:
- Splitting notes into a naive sentence pool
- Building a truncated auto-summary
- Deriving key points, flashcards and a shuffled multiple-choice quiz
"""

from .generator import DISTRACTORS, generate
from .models import Artifact, ExtractorLimits, Flashcard, QuizQuestion
from .text_processor import SUMMARY_LABEL, normalize_text, split_sentences, summarize, trim

__all__ = [
    # models
    "Artifact",
    "ExtractorLimits",
    "Flashcard",
    "QuizQuestion",
    # generation
    "generate",
    "DISTRACTORS",
    # text processing
    "normalize_text",
    "split_sentences",
    "summarize",
    "SUMMARY_LABEL",
    "trim",
]
