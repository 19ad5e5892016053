from __future__ import annotations


class StudyPackError(RuntimeError):
    pass


class ValidationError(StudyPackError):
    """A required text field was missing or blank. The message is user-facing."""


class GenerationError(StudyPackError):
    """The extractor failed unexpectedly; nothing was added."""


class PersistenceReadError(StudyPackError):
    """Persisted data could not be read or decoded."""


class PersistenceWriteError(StudyPackError):
    """Persisting the collection failed after the in-memory change was applied."""
