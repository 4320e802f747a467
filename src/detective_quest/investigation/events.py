"""Events emitted by the session for presentation."""

from __future__ import annotations

from dataclasses import dataclass, field

from detective_quest.domain.enums import Direction, EventKind


@dataclass(frozen=True)
class SessionEvent:
    kind: EventKind
    message: str
    room: str | None = None
    clue: str | None = None
    directions: dict[Direction, str] = field(default_factory=dict)
    clues: tuple[str, ...] = ()
