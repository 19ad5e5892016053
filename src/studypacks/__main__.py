"""
Command-line entry point for studypacks.

Usage:
    python -m studypacks generate "Biology" --notes-file notes.txt
    python -m studypacks list
    python -m studypacks show <id>
    python -m studypacks delete <id>
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from studypacks.common.logging_config import get_logger, setup_logging
from studypacks.config_models import RunConfig, load_config
from studypacks.packs import (
    GenerationError,
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    PackStore,
    ValidationError,
)
from studypacks.render import render_pack, render_packs

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_store(cfg: RunConfig) -> PackStore:
    storage: KeyValueStorage
    if cfg.storage.backend == "memory":
        storage = MemoryStorage()
    else:
        storage = JsonFileStorage(cfg.storage.directory)
    return PackStore(storage, cfg.storage.key, limits=cfg.extractor)


def confirm(prompt: str) -> bool:
    """Ask a yes/no question on the terminal. Anything but y/yes is a no."""
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _read_notes(args: argparse.Namespace) -> str:
    if args.notes_file is not None:
        path = Path(args.notes_file)
        if not path.is_file():
            raise ValidationError(f"Notes file not found: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise ValidationError(f"Notes file is not UTF-8 text: {path}")
    return args.notes or ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studypacks", description="Turn notes into local study packs")
    parser.add_argument(
        "--config",
        required=False,
        default=None,
        help="Path to YAML config (defaults to ./config.yaml when present)",
    )
    parser.add_argument(
        "--log-level",
        required=False,
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (overrides the config file)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
            ("create", "Save notes as a manual pack without generating anything"),
            ("generate", "Generate summary, key points, flashcards and a quiz from notes"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("title", help="Pack title")
        source = p.add_mutually_exclusive_group()
        source.add_argument("--notes", default=None, help="Notes text")
        source.add_argument("--notes-file", default=None, help="Read notes from a UTF-8 text file")

    p_list = sub.add_parser("list", help="List packs, newest first")
    p_list.add_argument("--details", action="store_true", help="Show key points and an example question")

    p_show = sub.add_parser("show", help="Show one pack with details")
    p_show.add_argument("pack_id")

    p_delete = sub.add_parser("delete", help="Delete one pack")
    p_delete.add_argument("pack_id")
    p_delete.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    p_clear = sub.add_parser("clear", help="Delete all packs")
    p_clear.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


def run_command(args: argparse.Namespace, store: PackStore, ask: Callable[[str], bool] = confirm) -> int:
    if args.command in ("create", "generate"):
        notes = _read_notes(args)
        if args.command == "create":
            pack = store.create_manual(args.title, notes)
        else:
            pack = store.create_generated(args.title, notes)
        print(render_pack(pack, details=True))
        return 0

    if args.command == "list":
        print(render_packs(store.list_for_display(), details=args.details))
        return 0

    if args.command == "show":
        pack = store.get(args.pack_id)
        if pack is None:
            print(f"No Study Pack with id {args.pack_id}", file=sys.stderr)
            return 1
        print(render_pack(pack, details=True))
        return 0

    if args.command == "delete":
        if store.get(args.pack_id) is None:
            print(f"No Study Pack with id {args.pack_id}", file=sys.stderr)
            return 1
        if not args.yes and not ask("Delete this Study Pack?"):
            return 0
        store.delete_one(args.pack_id)
        return 0

    if args.command == "clear":
        if not len(store):
            return 0
        if not args.yes and not ask("Delete ALL Study Packs? This can't be undone."):
            return 0
        count = store.delete_all()
        print(f"Deleted {count} Study Pack(s).")
        return 0

    raise SystemExit(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = load_config(Path(args.config) if args.config else None)
    setup_logging(args.log_level or cfg.log_level)
    logger.debug("Running command", extra={"command": args.command})

    store = build_store(cfg)
    try:
        return run_command(args, store)
    except (ValidationError, GenerationError) as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
