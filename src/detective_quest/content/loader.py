"""Load the mansion content document from YAML and validate it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from detective_quest import config
from detective_quest.domain.errors import ContentError
from detective_quest.domain.models import MansionContent

logger = logging.getLogger(__name__)

_CONTENT_CACHE: MansionContent | None = None


def parse_content(data: Any, source: str = "<memory>") -> MansionContent:
    if not isinstance(data, dict):
        raise ContentError(f"{source}: expected a mapping at the top level")
    try:
        return MansionContent.model_validate(data)
    except ValidationError as exc:
        raise ContentError(f"{source}: {exc}") from exc


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"Cannot read content file {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ContentError(f"Invalid YAML in {path}: {exc}") from exc


def load_content(path: Path | None = None) -> MansionContent:
    """Load mansion content; the default document is read once and cached."""
    global _CONTENT_CACHE
    if path is None and _CONTENT_CACHE is not None:
        return _CONTENT_CACHE
    content_path = Path(path) if path is not None else config.CONTENT_PATH
    content = parse_content(_read_document(content_path), source=str(content_path))
    logger.debug(
        "Loaded %d rooms and %d suspect links from %s",
        len(content.rooms),
        len(content.suspects),
        content_path,
    )
    if path is None:
        _CONTENT_CACHE = content
    return content
