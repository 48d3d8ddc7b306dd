from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_FILE = "flashcards.json"
DEFAULT_QUIZ_DELAY = 0.5


@dataclass
class Settings:
    file_path: str = DEFAULT_FILE
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    seed: Optional[int] = None
    quiz_delay: float = DEFAULT_QUIZ_DELAY


def _env_number(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal flashcard manager")
    parser.add_argument(
        "--file",
        default=None,
        help=f"Path to the flashcards JSON file (default: {DEFAULT_FILE})",
    )
    return parser


def load_settings(argv: Optional[Sequence[str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """Combine ``.env``, environment variables and command-line flags.

    The ``--file`` flag wins over ``FLASHCARDS_FILE``.
    """
    load_dotenv(dotenv_path)
    args = build_parser().parse_args(argv)

    file_path = args.file or os.environ.get("FLASHCARDS_FILE") or DEFAULT_FILE
    delay = _env_number("FLASHCARDS_QUIZ_DELAY", float, DEFAULT_QUIZ_DELAY)
    if delay < 0:
        logger.warning("Ignoring negative FLASHCARDS_QUIZ_DELAY=%s", delay)
        delay = DEFAULT_QUIZ_DELAY

    return Settings(
        file_path=file_path,
        log_level=os.environ.get("FLASHCARDS_LOG_LEVEL", "WARNING").upper(),
        log_file=os.environ.get("FLASHCARDS_LOG_FILE") or None,
        seed=_env_number("FLASHCARDS_SEED", int, None),
        quiz_delay=delay,
    )
