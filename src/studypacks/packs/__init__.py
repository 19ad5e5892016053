"""Pack lifecycle: creation, identity, ordering, deletion and persistence.

Example usage:

from studypacks.packs import JsonFileStorage, PackStore

store = PackStore(JsonFileStorage("~/.studypacks"))
pack = store.create_generated("Biology", "Cells divide. DNA replicates.")
for p in store.list_for_display():
    print(p.title, p.created_at)
"""
from .errors import (
    GenerationError,
    PersistenceReadError,
    PersistenceWriteError,
    StudyPackError,
    ValidationError,
)
from .ids import new_pack_id
from .models import Pack, dump_packs, format_timestamp, load_records
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .store import MANUAL_SUMMARY, PackStore

__all__ = [
    # errors
    "StudyPackError",
    "ValidationError",
    "GenerationError",
    "PersistenceReadError",
    "PersistenceWriteError",
    # models
    "Pack",
    "dump_packs",
    "load_records",
    "format_timestamp",
    "new_pack_id",
    # storage
    "KeyValueStorage",
    "JsonFileStorage",
    "MemoryStorage",
    # store
    "PackStore",
    "MANUAL_SUMMARY",
]
