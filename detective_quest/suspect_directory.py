"""Clue -> suspect lookup table with separately chained buckets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

DEFAULT_TABLE_SIZE = 101

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFFFFFFFFFF


def djb2_hash(text: str) -> int:
    """h = h * 33 + byte over the UTF-8 bytes, wrapped to 64 bits."""
    h = _HASH_SEED
    for byte in text.encode("utf-8"):
        h = ((h << 5) + h + byte) & _HASH_MASK
    return h


@dataclass
class DirectoryEntry:
    clue: str
    suspect: str
    next: Optional["DirectoryEntry"] = None


class SuspectDirectory:
    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if not isinstance(table_size, int) or table_size <= 0:
            raise ValueError(f"table_size must be a positive integer, got {table_size!r}")
        self.table_size = table_size
        self.buckets: List[Optional[DirectoryEntry]] = [None] * table_size
        self._size = 0

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, str]], table_size: int = DEFAULT_TABLE_SIZE
    ) -> "SuspectDirectory":
        directory = cls(table_size)
        for clue, suspect in pairs:
            directory.insert(clue, suspect)
        return directory

    def bucket_index(self, clue: str) -> int:
        return djb2_hash(clue) % self.table_size

    def insert(self, clue: str, suspect: str) -> None:
        """Map clue to suspect, overwriting any earlier suspect for the same clue."""
        index = self.bucket_index(clue)
        entry = self.buckets[index]
        while entry is not None:
            if entry.clue == clue:
                entry.suspect = suspect
                return
            entry = entry.next
        self.buckets[index] = DirectoryEntry(clue, suspect, self.buckets[index])
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        entry = self.buckets[self.bucket_index(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return None

    def items(self) -> Iterator[Tuple[str, str]]:
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None
