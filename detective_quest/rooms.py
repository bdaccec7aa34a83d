from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from detective_quest.ruleset import MANSION_LINKS, MANSION_ROOMS

Link = Tuple[int, Optional[int], Optional[int]]


@dataclass(frozen=True)
class Room:
    name: str
    clue: str = ""
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    def child(self, direction: str) -> Optional["Room"]:
        if direction == "left":
            return self.left
        if direction == "right":
            return self.right
        raise ValueError(f"Unknown direction: {direction}")


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """Create a room with no exits. A missing or empty clue means the room is bare."""
    return Room(name=name, clue=clue or "")


def build_mansion(
    rooms: Sequence[Dict[str, Any]] = MANSION_ROOMS,
    links: Sequence[Link] = MANSION_LINKS,
) -> Room:
    """Materialize a room table and its (parent, left, right) links into a tree.

    Index 0 is the root. Every other room must hang from exactly one parent.
    """
    if not rooms:
        raise ValueError("rooms must contain at least one room")

    children: Dict[int, Tuple[Optional[int], Optional[int]]] = {}
    parent_of: Dict[int, int] = {}
    for parent, left, right in links:
        _check_index(parent, len(rooms))
        if parent in children:
            raise ValueError(f"Room {parent} is linked more than once as a parent")
        for child in (left, right):
            if child is None:
                continue
            _check_index(child, len(rooms))
            if child == 0 or child in parent_of:
                raise ValueError(f"Room {child} would have more than one parent")
            parent_of[child] = parent
        children[parent] = (left, right)

    # A room with one parent can still sit on a loop detached from the root.
    reached = {0}
    pending = [0]
    while pending:
        for child in children.get(pending.pop(), (None, None)):
            if child is not None and child not in reached:
                reached.add(child)
                pending.append(child)
    unreachable = [i for i in range(len(rooms)) if i not in reached]
    if unreachable:
        names = ", ".join(str(rooms[i].get("name")) for i in unreachable)
        raise ValueError(f"Rooms not reachable from the root: {names}")

    def materialize(index: int) -> Room:
        spec = rooms[index]
        left, right = children.get(index, (None, None))
        return Room(
            name=str(spec["name"]),
            clue=spec.get("clue") or "",
            left=materialize(left) if left is not None else None,
            right=materialize(right) if right is not None else None,
        )

    return materialize(0)


def _check_index(index: Any, size: int) -> None:
    if not isinstance(index, int) or not 0 <= index < size:
        raise ValueError(f"Unknown room index: {index}")


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room, parents before children, left before right."""
    stack: List[Room] = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)
