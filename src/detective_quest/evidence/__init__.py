"""Collected clues and the clue-to-suspect table."""

from .clue_index import ClueIndex, ClueNode
from .suspects import ChainEntry, SuspectLookup, hash_clue

__all__ = [
    "ChainEntry",
    "ClueIndex",
    "ClueNode",
    "SuspectLookup",
    "hash_clue",
]
