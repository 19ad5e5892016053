"""
Text Processor

Heuristics that turn raw notes into the pieces the generator works with:
a trimmed text, a naive sentence pool and a truncated summary.
"""
from __future__ import annotations

import re
from typing import List

SUMMARY_LABEL = "Summary (auto): "
TRUNCATION_MARKER = "..."

# Periods and line breaks only. Abbreviations and decimals are split too.
_SENTENCE_BOUNDARY = re.compile(r"[.\n]")

# Whitespace and line terminators as understood by browser `trim()`:
# no U+001C-U+001F or U+0085, but U+FEFF is included.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    """Strip surrounding WHITESPACE characters."""
    return text.strip(WHITESPACE)


def normalize_text(text: str) -> str:
    """Strip surrounding whitespace from the notes."""
    return trim(text)


def split_sentences(text: str) -> List[str]:
    """
    Split text into the sentence pool.

    Every period and line break ends a fragment. Fragments are stripped and
    empty ones dropped; order is preserved.

    Args:
        text (str): Normalized notes

    Returns:
        List[str]: Non-empty fragments in original order
    """
    fragments = (trim(part) for part in _SENTENCE_BOUNDARY.split(text))
    return [part for part in fragments if part]


def summarize(text: str, max_chars: int = 400) -> str:
    """Label the text as an automatic summary, truncating past max_chars."""
    if len(text) > max_chars:
        text = text[:max_chars] + TRUNCATION_MARKER
    return SUMMARY_LABEL + text
