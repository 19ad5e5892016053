from __future__ import annotations

import secrets
from datetime import datetime
from typing import Container


def new_pack_id(now: datetime, existing: Container[str]) -> str:
    """Millisecond timestamp plus a random hex suffix, never one already in `existing`."""
    millis = int(now.timestamp() * 1000)
    while True:
        candidate = f"{millis}-{secrets.token_hex(4)}"
        if candidate not in existing:
            return candidate
