import random
from itertools import permutations

import pytest

from studypacks.extractor import (
    DISTRACTORS,
    SUMMARY_LABEL,
    ExtractorLimits,
    generate,
    split_sentences,
    summarize,
    trim,
)

CATS = "Cats are mammals. Cats sleep a lot. Cats are independent."


def test_split_sentences_on_periods_and_newlines():
    text = "First point.\nSecond point\n\n  Third. . Fourth  "
    assert split_sentences(text) == ["First point", "Second point", "Third", "Fourth"]


def test_split_sentences_is_naive_about_abbreviations_and_decimals():
    assert split_sentences("Dr. Smith measured 3.5 cm") == ["Dr", "Smith measured 3", "5 cm"]


def test_split_sentences_empty_text():
    assert split_sentences("") == []
    assert split_sentences(" . \n . ") == []


def test_summary_short_text_is_kept_whole():
    assert summarize("Short notes.") == SUMMARY_LABEL + "Short notes."


def test_summary_truncates_after_400_chars():
    text = "a" * 401
    summary = summarize(text)
    assert summary == SUMMARY_LABEL + "a" * 400 + "..."
    assert len(summary) == len(SUMMARY_LABEL) + 403


def test_summary_exactly_400_chars_is_not_truncated():
    summary = summarize("b" * 400)
    assert summary == SUMMARY_LABEL + "b" * 400


def test_generate_trims_notes_before_summarizing():
    artifact = generate("T", "   padded notes \n\n")
    assert artifact.summary == SUMMARY_LABEL + "padded notes"


def test_cats_scenario():
    artifact = generate("Cats", CATS, rng=random.Random(1))
    sentences = ["Cats are mammals", "Cats sleep a lot", "Cats are independent"]

    assert artifact.key_points == ["• " + s for s in sentences]

    assert [(c.front, c.back) for c in artifact.flashcards] == [
        ("Key idea #1 about Cats", sentences[0]),
        ("Key idea #2 about Cats", sentences[1]),
        ("Key idea #3 about Cats", sentences[2]),
    ]

    assert len(artifact.quiz_questions) == 3
    for q, sentence in zip(artifact.quiz_questions, sentences):
        assert q.question == "What is an important fact about Cats?"
        assert len(q.options) == 3
        assert sorted(q.options) == sorted([sentence, *DISTRACTORS])
        assert q.options[q.correct_index] == sentence
        assert q.explanation == f'The correct idea is: "{sentence}".'


@pytest.mark.parametrize("count", [1, 3, 4, 5, 6, 9])
def test_output_lengths_are_bounded_by_sentence_count(count):
    notes = ". ".join(f"Fact number {i}" for i in range(count))
    artifact = generate("Numbers", notes, rng=random.Random(count))
    assert len(artifact.key_points) == min(6, count)
    assert len(artifact.flashcards) == min(6, count)
    assert len(artifact.quiz_questions) == min(4, count)


def test_correct_index_points_at_seed_sentence_for_many_seeds():
    for seed in range(50):
        artifact = generate("Topic", "Alpha. Beta\nGamma. Delta. Epsilon", rng=random.Random(seed))
        for q, sentence in zip(artifact.quiz_questions, ["Alpha", "Beta", "Gamma", "Delta"]):
            assert q.options[q.correct_index] == sentence


def test_every_option_order_is_reachable():
    seen = set()
    rng = random.Random(1234)
    for _ in range(300):
        q = generate("T", "Answer", rng=rng).quiz_questions[0]
        seen.add(tuple(q.options))
    assert seen == set(permutations(["Answer", *DISTRACTORS]))


def test_repeated_sentences_each_get_a_question():
    artifact = generate("T", "Same. Same", rng=random.Random(3))
    assert len(artifact.quiz_questions) == 2
    for q in artifact.quiz_questions:
        assert q.correct_index == q.options.index("Same")


def test_generate_without_rng_still_consistent():
    artifact = generate("T", CATS)
    for q in artifact.quiz_questions:
        assert q.options[q.correct_index] in CATS


def test_custom_limits():
    limits = ExtractorLimits(summary_max_chars=5, max_key_points=1, max_flashcards=2, max_quiz_questions=0)
    artifact = generate("Cats", CATS, limits=limits)
    assert artifact.summary == SUMMARY_LABEL + "Cats ..."
    assert len(artifact.key_points) == 1
    assert len(artifact.flashcards) == 2
    assert artifact.quiz_questions == []


def test_trim_matches_browser_whitespace_rules():
    bom = chr(0xFEFF)
    nbsp = chr(0xA0)
    file_separator = chr(0x1C)
    next_line = chr(0x85)
    assert trim(f"{bom}{nbsp} notes\t") == "notes"
    assert trim(f"{file_separator}notes{next_line}") == f"{file_separator}notes{next_line}"


def test_byte_order_mark_does_not_leak_into_sentences():
    artifact = generate("T", chr(0xFEFF) + "First. Second", rng=random.Random(0))
    assert artifact.summary == SUMMARY_LABEL + "First. Second"
    assert artifact.key_points == ["• First", "• Second"]


def test_extractor_does_not_depend_on_configuration_module():
    import studypacks.extractor.generator as generator

    assert "config_models" not in generator.__dict__
    assert ExtractorLimits.__module__ == "studypacks.extractor.models"
    assert ExtractorLimits().max_quiz_questions == 4
