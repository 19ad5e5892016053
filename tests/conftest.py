import logging
import random
from datetime import datetime, timedelta, timezone

import pytest

from studypacks.common.logging_config import LOGGER_NAMESPACE
from studypacks.packs import MemoryStorage, PackStore


class FakeClock:
    """Returns a fixed start time, advancing by `step` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2026, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture(autouse=True)
def _reset_studypacks_logger():
    """setup_logging() detaches the namespace from root; undo that so caplog keeps working."""
    yield
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage, clock) -> PackStore:
    return PackStore(storage, clock=clock, rng=random.Random(7))
