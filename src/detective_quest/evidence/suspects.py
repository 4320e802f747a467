"""Hash table with separate chaining: clue text -> suspect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from detective_quest import config
from detective_quest.domain.models import SuspectLink

logger = logging.getLogger(__name__)


def hash_clue(text: str, bucket_count: int, multiplier: int = config.HASH_MULTIPLIER) -> int:
    """Polynomial hash over the UTF-8 bytes of ``text``, reduced to a bucket."""
    if bucket_count < 1:
        raise ValueError("bucket_count must be at least 1")
    value = 0
    for byte in text.encode("utf-8"):
        value = (value * multiplier + byte) % bucket_count
    return value


@dataclass(eq=False)
class ChainEntry:
    key: str
    suspect: str
    next: "ChainEntry | None" = None


class SuspectLookup:
    """Write-once table mapping each clue to the suspect it points at."""

    def __init__(self, bucket_count: int = config.SUSPECT_BUCKETS) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self.bucket_count = bucket_count
        self.buckets: list[ChainEntry | None] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_links(
        cls, links: Iterable[SuspectLink], bucket_count: int = config.SUSPECT_BUCKETS
    ) -> "SuspectLookup":
        table = cls(bucket_count)
        for link in links:
            table.insert(link.clue, link.suspect)
        return table

    def bucket_for(self, text: str) -> int:
        return hash_clue(text, self.bucket_count)

    def insert(self, text: str, suspect: str) -> None:
        """Prepend an entry to the bucket chain for ``text``."""
        index = self.bucket_for(text)
        try:
            entry = ChainEntry(text, suspect, self.buckets[index])
        except MemoryError:
            logger.warning("Out of memory; suspect link dropped: %s -> %s", text, suspect)
            return
        self.buckets[index] = entry
        self._size += 1
        logger.debug("Linked clue to %s in bucket %d", suspect, index)

    def lookup(self, text: str) -> str | None:
        """Suspect for ``text``, or ``None`` when the clue names nobody."""
        entry = self.buckets[self.bucket_for(text)]
        while entry is not None:
            if entry.key == text:
                return entry.suspect
            entry = entry.next
        return None

    def chain(self, index: int) -> Iterator[ChainEntry]:
        entry = self.buckets[index]
        while entry is not None:
            yield entry
            entry = entry.next

    def items(self) -> Iterator[tuple[str, str]]:
        for index in range(self.bucket_count):
            for entry in self.chain(index):
                yield entry.key, entry.suspect

    def suspects(self) -> list[str]:
        return sorted({suspect for _, suspect in self.items()})

    def load_factor(self) -> float:
        return self._size / self.bucket_count

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.lookup(text) is not None

    def __len__(self) -> int:
        return self._size
