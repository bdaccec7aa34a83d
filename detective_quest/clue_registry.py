"""Ordered set of the clues collected during one playthrough."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class ClueNode:
    clue: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


class ClueRegistry:
    """Binary search tree of unique clue strings, kept in alphabetical order."""

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def insert(self, clue: str) -> bool:
        """Add a clue. Returns False for empty clues and clues already collected."""
        if not clue:
            return False
        if self.root is None:
            self.root = ClueNode(clue)
            self._size = 1
            return True

        node = self.root
        while True:
            if clue == node.clue:
                return False
            if clue < node.clue:
                if node.left is None:
                    node.left = ClueNode(clue)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueNode(clue)
                    break
                node = node.right
        self._size += 1
        return True

    def traverse_in_order(self) -> Iterator[str]:
        stack: List[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.traverse_in_order()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self.root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def to_list(self) -> List[str]:
        return list(self.traverse_in_order())
