from __future__ import annotations

import random
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Set

from pydantic import ValidationError as PydanticValidationError

from .errors import GenerationError, PersistenceReadError, PersistenceWriteError, ValidationError
from .ids import new_pack_id
from .models import Pack, dump_packs, load_records
from .storage import KeyValueStorage
from ..common.logging_config import get_logger
from ..config_models import DEFAULT_STORAGE_KEY
from ..extractor import ExtractorLimits, generate, trim

logger = get_logger(__name__)

MANUAL_SUMMARY = "Manual pack (no auto summary). You can later regenerate this topic with the generate command."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PackStore:
    """In-memory pack collection backed by a single key-value entry.

    The collection is read from storage on construction and written back in
    full after every mutation. Storage order is insertion order; display order
    comes from list_for_display().

    Notes:
    - unreadable or malformed data means "no packs"; invalid records are skipped
    - duplicate ids from older data are replaced on load
    - write problems are logged; the in-memory state stays authoritative
    - each mutate-and-persist sequence holds the instance lock
    """

    def __init__(
            self,
            storage: KeyValueStorage,
            key: str = DEFAULT_STORAGE_KEY,
            *,
            clock: Callable[[], datetime] = _utc_now,
            limits: Optional[ExtractorLimits] = None,
            rng: Optional[random.Random] = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self._clock = clock
        self._limits = limits or ExtractorLimits()
        self._rng = rng
        self._lock = threading.RLock()
        self._packs: List[Pack] = []
        self.load_all()

    def __len__(self) -> int:
        return len(self._packs)

    # --- persistence ---
    def load_all(self) -> List[Pack]:
        """Reload the collection from storage and return a copy of it."""
        with self._lock:
            self._packs = self._read()
            return list(self._packs)

    def _read(self) -> List[Pack]:
        try:
            raw = self.storage.read(self.key)
            if not raw:
                return []
            try:
                records = load_records(raw)
            except PydanticValidationError as e:
                raise PersistenceReadError(f"Malformed pack data under {self.key!r}") from e
        except PersistenceReadError as e:
            logger.warning("Ignoring unreadable pack data", extra={"key": self.key, "error": str(e)})
            return []

        packs: List[Pack] = []
        seen: Set[str] = set()
        for index, record in enumerate(records):
            try:
                pack = Pack.model_validate(record)
            except PydanticValidationError as e:
                logger.warning(
                    "Skipping invalid pack record",
                    extra={"key": self.key, "index": index, "error": e.errors()[0]["msg"]},
                )
                continue
            # Older blobs may hold timestamp ids created in the same millisecond.
            if pack.id in seen:
                new_id = new_pack_id(pack.created_at, seen)
                logger.warning("Reassigning duplicate pack id", extra={"old_id": pack.id, "pack_id": new_id})
                pack = pack.model_copy(update={"id": new_id})
            seen.add(pack.id)
            packs.append(pack)
        return packs

    def _persist(self) -> None:
        try:
            self.storage.write(self.key, dump_packs(self._packs))
        except PersistenceWriteError as e:
            logger.error("Failed to save packs", extra={"key": self.key, "error": str(e)})

    # --- creation ---
    def _now(self) -> datetime:
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        # Persisted timestamps carry milliseconds only.
        return now.replace(microsecond=now.microsecond // 1000 * 1000)

    def _append(self, **fields) -> Pack:
        with self._lock:
            created_at = self._now()
            pack = Pack(
                id=new_pack_id(created_at, {p.id for p in self._packs}),
                created_at=created_at,
                **fields,
            )
            self._packs.append(pack)
            self._persist()
        logger.info("Pack created", extra={"pack_id": pack.id, "title": pack.title})
        return pack

    def create_manual(self, title: str, notes: str = "") -> Pack:
        """Add a pack from user input without running the extractor."""
        title = trim(title or "")
        notes = trim(notes or "")
        if not title:
            raise ValidationError("Title is required.")
        return self._append(
            title=title,
            notes=notes,
            summary=MANUAL_SUMMARY,
            key_points=[],
            flashcards=[],
            quiz_questions=[],
        )

    def create_generated(self, title: str, notes: str) -> Pack:
        """Run the extractor over the notes and add the resulting pack."""
        title = trim(title or "")
        notes = trim(notes or "")
        if not title or not notes:
            raise ValidationError("Title and notes are required for AI generation.")

        try:
            artifact = generate(title, notes, rng=self._rng, limits=self._limits)
        except Exception as e:
            logger.exception("Pack generation failed", extra={"title": title})
            raise GenerationError("Something went wrong generating the pack.") from e

        return self._append(
            title=title,
            notes=notes,
            summary=artifact.summary,
            key_points=artifact.key_points,
            flashcards=artifact.flashcards,
            quiz_questions=artifact.quiz_questions,
        )

    # --- deletion ---
    def delete_one(self, pack_id: str) -> bool:
        """Remove the pack with this id. Unknown ids are not an error."""
        with self._lock:
            remaining = [p for p in self._packs if p.id != pack_id]
            removed = len(remaining) != len(self._packs)
            self._packs = remaining
            self._persist()
        if removed:
            logger.info("Pack deleted", extra={"pack_id": pack_id})
        return removed

    def delete_all(self) -> int:
        """Remove every pack and return how many there were."""
        with self._lock:
            count = len(self._packs)
            if not count:
                return 0
            self._packs = []
            self._persist()
        logger.info("All packs deleted", extra={"count": count})
        return count

    # --- queries ---
    def get(self, pack_id: str) -> Optional[Pack]:
        return next((p for p in self._packs if p.id == pack_id), None)

    def list_for_display(self) -> List[Pack]:
        """Newest first; packs created at the same instant keep insertion order."""
        return sorted(self._packs, key=lambda p: p.created_at, reverse=True)
