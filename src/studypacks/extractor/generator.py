from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .models import Artifact, ExtractorLimits, Flashcard, QuizQuestion
from .text_processor import normalize_text, split_sentences, summarize

KEY_POINT_BULLET = "• "
DISTRACTORS = (
    "This option is incorrect but related.",
    "This is a random wrong answer.",
)


def build_key_points(sentences: List[str], limit: int) -> List[str]:
    return [KEY_POINT_BULLET + s for s in sentences[:limit]]


def build_flashcards(title: str, sentences: List[str], limit: int) -> List[Flashcard]:
    return [
        Flashcard(front=f"Key idea #{idx} about {title}", back=s)
        for idx, s in enumerate(sentences[:limit], start=1)
    ]


def shuffle_options(correct: str, distractors: Tuple[str, ...], rng: random.Random) -> Tuple[List[str], int]:
    """Shuffle the correct answer in with the distractors.

    Returns the options and the index of the first option equal to `correct`,
    so the pair is always consistent.
    """
    options = [correct, *distractors]
    rng.shuffle(options)
    return options, options.index(correct)


def build_quiz(title: str, sentences: List[str], limit: int, rng: random.Random) -> List[QuizQuestion]:
    questions: List[QuizQuestion] = []
    for s in sentences[:limit]:
        options, correct_index = shuffle_options(s, DISTRACTORS, rng)
        questions.append(
            QuizQuestion(
                question=f"What is an important fact about {title}?",
                options=options,
                correct_index=correct_index,
                explanation=f'The correct idea is: "{s}".',
            )
        )
    return questions


def generate(
        title: str,
        notes: str,
        *,
        rng: Optional[random.Random] = None,
        limits: Optional[ExtractorLimits] = None,
) -> Artifact:
    """Derive summary, key points, flashcards and a quiz from notes.

    Callers pass a non-empty title and notes. Apart from the quiz option order
    the result is fully determined by the inputs; pass a seeded `rng` to fix
    that too.
    """
    limits = limits or ExtractorLimits()
    rng = rng or random.Random()

    text = normalize_text(notes)
    sentences = split_sentences(text)

    return Artifact(
        summary=summarize(text, limits.summary_max_chars),
        key_points=build_key_points(sentences, limits.max_key_points),
        flashcards=build_flashcards(title, sentences, limits.max_flashcards),
        quiz_questions=build_quiz(title, sentences, limits.max_quiz_questions, rng),
    )
