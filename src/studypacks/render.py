"""
Plain-text views of packs for the command line.
"""
from __future__ import annotations

from typing import List, Sequence

from .packs.models import Pack

EMPTY_MESSAGE = "You don't have any Study Packs yet."


def format_created(pack: Pack) -> str:
    """Creation time in the local timezone."""
    return pack.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def render_pack(pack: Pack, *, details: bool = False) -> str:
    lines: List[str] = [
        f"{pack.title}  [{pack.id}]",
        f"Created: {format_created(pack)}",
        pack.summary or "No summary yet.",
        f"{len(pack.key_points)} key points | {len(pack.flashcards)} flashcards | "
        f"{len(pack.quiz_questions)} quiz questions",
    ]
    if details:
        lines.append("")
        if pack.key_points:
            lines.append("Key Points:")
            lines.extend(pack.key_points)
        else:
            lines.append("No key points generated.")
        if pack.quiz_questions:
            lines.append("")
            lines.append("Example Question:")
            lines.append(pack.quiz_questions[0].question)
    return "\n".join(lines)


def render_packs(packs: Sequence[Pack], *, details: bool = False) -> str:
    if not packs:
        return EMPTY_MESSAGE
    return "\n\n".join(render_pack(p, details=details) for p in packs)
