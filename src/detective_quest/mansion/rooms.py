"""Room tree: construction, navigation and one-time clue collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from detective_quest.domain.enums import Direction
from detective_quest.domain.errors import MapBuildError, NoSuchPath
from detective_quest.domain.models import MansionContent, RoomSpec
from detective_quest.mansion.topology import validate_topology

logger = logging.getLogger(__name__)

NAVIGABLE = (Direction.LEFT, Direction.RIGHT)


@dataclass(eq=False)
class Room:
    name: str
    clue: str | None = None
    left: "Room | None" = None
    right: "Room | None" = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child(self, direction: Direction) -> "Room | None":
        if direction == Direction.LEFT:
            return self.left
        if direction == Direction.RIGHT:
            return self.right
        return None


class RoomTree:
    """A finite binary tree of rooms owned by a single investigation."""

    def __init__(self, root: Room) -> None:
        self.root: Room | None = root

    def children(self, room: Room) -> tuple[Direction, ...]:
        """Directions with a room behind them; empty for a leaf."""
        return tuple(direction for direction in NAVIGABLE if room.child(direction) is not None)

    def peek(self, room: Room, direction: Direction) -> str | None:
        target = room.child(direction)
        return target.name if target is not None else None

    def move(self, room: Room, direction: Direction) -> Room:
        target = room.child(direction)
        if target is None:
            raise NoSuchPath(room.name, direction.value)
        logger.debug("Moved %s from %s to %s", direction, room.name, target.name)
        return target

    def collect_clue(self, room: Room) -> str | None:
        clue = room.clue
        room.clue = None
        return clue

    def walk(self) -> Iterator[Room]:
        """Pre-order walk: room, left subtree, right subtree."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            room = stack.pop()
            yield room
            if room.right is not None:
                stack.append(room.right)
            if room.left is not None:
                stack.append(room.left)

    def find(self, name: str) -> Room | None:
        return next((room for room in self.walk() if room.name == name), None)

    def depth(self) -> int:
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            room, level = stack.pop()
            deepest = max(deepest, level)
            for child in (room.left, room.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def teardown(self) -> None:
        """Post-order release: children are detached before their parent."""
        if self.root is None:
            return
        stack: list[tuple[Room, bool]] = [(self.root, False)]
        while stack:
            room, expanded = stack.pop()
            if expanded:
                room.left = None
                room.right = None
                continue
            stack.append((room, True))
            for child in (room.right, room.left):
                if child is not None:
                    stack.append((child, False))
        self.root = None

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def __iter__(self) -> Iterator[Room]:
        return self.walk()


def _build_room(name: str, specs: dict[str, RoomSpec]) -> Room:
    spec = specs[name]
    room = Room(name=spec.name, clue=spec.clue)
    if spec.left is not None:
        room.left = _build_room(spec.left, specs)
    if spec.right is not None:
        room.right = _build_room(spec.right, specs)
    return room


def build_room_tree(content: MansionContent) -> RoomTree:
    """Build the whole map once from content; any failure is fatal."""
    validate_topology(content)
    specs = content.room_specs()
    try:
        root = _build_room(content.root, specs)
    except MemoryError as exc:
        logger.error("Out of memory while building the mansion map")
        raise MapBuildError("Out of memory while building the mansion map") from exc
    tree = RoomTree(root)
    logger.debug("Built mansion map with %d rooms rooted at %s", len(specs), content.root)
    return tree
