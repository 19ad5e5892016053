from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .extractor.models import ExtractorLimits

DEFAULT_STORAGE_KEY = "aiStudyNotes_packs_v2"
DEFAULT_CONFIG_FILE = "config.yaml"


def _default_storage_dir() -> Path:
    home = os.getenv("STUDYPACKS_HOME")
    if home:
        return Path(home)
    return Path.home() / ".studypacks"


class StorageConfig(BaseModel):
    """Where the pack collection blob lives.

    - backend: "file" writes one JSON file per key under `directory`; "memory" keeps nothing on disk
    - key: name of the entry holding the serialized collection
    """

    backend: Literal["file", "memory"] = Field(default="file", description="Storage backend")
    directory: Path = Field(default_factory=_default_storage_dir, description="Directory for the file backend")
    key: str = Field(default=DEFAULT_STORAGE_KEY, min_length=1, description="Entry name for the pack collection")


class RunConfig(BaseModel):
    """Top-level configuration loaded from YAML."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    extractor: ExtractorLimits = Field(default_factory=ExtractorLimits)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_config(config_path: Optional[Path] = None) -> RunConfig:
    """Load a RunConfig from YAML.

    With no explicit path, ./config.yaml is used when present and defaults otherwise.
    An explicit path that does not exist is an error.
    """
    path = config_path
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not path.exists():
            return RunConfig()
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    try:
        return RunConfig.model_validate(raw)
    except ValidationError as ve:
        raise SystemExit(f"Invalid configuration in {path}:\n{ve}")
