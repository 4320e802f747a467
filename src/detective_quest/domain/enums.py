"""Shared enums for the mansion, the session and presentation."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    EXIT = "exit"


class Phase(StrEnum):
    EXPLORING = "exploring"
    REVIEWING = "reviewing"
    ACCUSING = "accusing"
    FINISHED = "finished"


class Verdict(StrEnum):
    CASE_CLOSED = "case_closed"
    INCONCLUSIVE = "inconclusive"


class InsertStatus(StrEnum):
    ADDED = "added"
    DUPLICATE = "duplicate"
    DROPPED = "dropped"


class EventKind(StrEnum):
    ROOM_ENTERED = "room_entered"
    CLUE_FOUND = "clue_found"
    CLUE_REPEATED = "clue_repeated"
    CLUE_DROPPED = "clue_dropped"
    DIRECTIONS_OFFERED = "directions_offered"
    PATH_REJECTED = "path_rejected"
    INPUT_REJECTED = "input_rejected"
    LEAF_REACHED = "leaf_reached"
    EXITED = "exited"
    CLUES_REVIEWED = "clues_reviewed"
    NO_CLUES = "no_clues"
    EVIDENCE_MATCHED = "evidence_matched"
    VERDICT_REACHED = "verdict_reached"
