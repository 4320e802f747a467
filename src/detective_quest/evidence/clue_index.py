"""Binary search tree of collected clues, ordered by clue text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from detective_quest.domain.enums import InsertStatus

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ClueNode:
    text: str
    left: "ClueNode | None" = None
    right: "ClueNode | None" = None


class ClueIndex:
    """
    Unbalanced BST keyed by clue text.

    Comparison is plain ``str`` ordering (case-sensitive, code point by code
    point). Exact duplicates are never stored.
    """

    def __init__(self) -> None:
        self.root: ClueNode | None = None
        self.last_insert: InsertStatus | None = None
        self._size = 0

    @property
    def last_insert_added(self) -> bool:
        return self.last_insert == InsertStatus.ADDED

    def insert(self, text: str) -> ClueNode | None:
        """Insert ``text`` and return the root; duplicates leave the tree unchanged.

        ``last_insert`` records whether the text was added, was already
        present, or was dropped because no node could be created."""
        if not text or not text.strip():
            raise ValueError("clue text must not be blank")
        if self.root is None:
            node = self._new_node(text)
            if node is not None:
                self.root = node
                self._added(text)
            return self.root
        current = self.root
        while True:
            if text == current.text:
                logger.debug("Clue already indexed: %s", text)
                self.last_insert = InsertStatus.DUPLICATE
                return self.root
            if text < current.text:
                if current.left is None:
                    node = self._new_node(text)
                    if node is not None:
                        current.left = node
                        self._added(text)
                    return self.root
                current = current.left
            else:
                if current.right is None:
                    node = self._new_node(text)
                    if node is not None:
                        current.right = node
                        self._added(text)
                    return self.root
                current = current.right

    def _new_node(self, text: str) -> ClueNode | None:
        try:
            return ClueNode(text)
        except MemoryError:
            logger.warning("Out of memory; clue dropped: %s", text)
            self.last_insert = InsertStatus.DROPPED
            return None

    def _added(self, text: str) -> None:
        self.last_insert = InsertStatus.ADDED
        self._size += 1
        logger.debug("Indexed clue: %s", text)

    def in_order(self) -> Iterator[str]:
        """Clue texts in ascending order. Each call starts a fresh walk."""
        stack: list[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def height(self) -> int:
        if self.root is None:
            return 0
        tallest = 0
        stack = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            tallest = max(tallest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return tallest

    def clear(self) -> None:
        """Post-order teardown of every node."""
        stack: list[tuple[ClueNode, bool]] = []
        if self.root is not None:
            stack.append((self.root, False))
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.left = None
                node.right = None
                continue
            stack.append((node, True))
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, False))
        self.root = None
        self._size = 0
        self.last_insert = None

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None
