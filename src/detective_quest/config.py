"""Tunable constants for the mansion investigation."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent

EVIDENCE_THRESHOLD = 2
SUSPECT_BUCKETS = 10
HASH_MULTIPLIER = 31

CONTENT_PATH = Path(
    os.environ.get("DETECTIVE_QUEST_CONTENT", PACKAGE_ROOT / "content" / "data" / "mansion.yml")
)
LOG_LEVEL = os.environ.get("DETECTIVE_QUEST_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None, handlers: list[logging.Handler] | None = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT, handlers=handlers)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number
