"""Error hierarchy for the investigation."""

from __future__ import annotations


class DetectiveQuestError(Exception):
    """Base class for every error raised by the package."""


class ContentError(DetectiveQuestError):
    """The static content document is missing or malformed."""


class MapBuildError(DetectiveQuestError):
    """The room tree could not be constructed. Fatal at startup."""


class NoSuchPath(DetectiveQuestError):
    def __init__(self, room: str, direction: str) -> None:
        super().__init__(f"No path {direction} from {room}.")
        self.room = room
        self.direction = direction


class InvalidInput(DetectiveQuestError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized choice: {token!r}")
        self.token = token


class PhaseError(DetectiveQuestError):
    """A session step was called outside the phase that accepts it."""
