import dataclasses

import pytest

from detective_quest.rooms import build_mansion, create_room, iter_rooms
from detective_quest.ruleset import MANSION_ROOMS


def test_create_room_without_clue():
    room = create_room("Corredor")
    assert room.name == "Corredor"
    assert room.clue == ""
    assert not room.has_clue
    assert room.left is None and room.right is None


def test_create_room_with_clue():
    room = create_room("Cozinha", "Copo com fragmento de esmalte")
    assert room.has_clue
    assert room.clue == "Copo com fragmento de esmalte"


def test_rooms_are_immutable():
    room = create_room("Hall de Entrada")
    with pytest.raises(dataclasses.FrozenInstanceError):
        room.name = "Outro"


def test_mansion_topology():
    hall = build_mansion()
    assert hall.name == "Hall de Entrada"
    assert hall.clue == "Pegada suja"
    assert hall.left.name == "Sala de Estar"
    assert hall.right.name == "Biblioteca"
    assert hall.left.left.name == "Cozinha"
    assert hall.left.right.name == "Jardim"
    assert hall.right.left is None
    assert hall.right.right.name == "Porão"


def test_mansion_contains_every_room_once():
    names = [room.name for room in iter_rooms(build_mansion())]
    assert names == ["Hall de Entrada", "Sala de Estar", "Cozinha", "Jardim", "Biblioteca", "Porão"]
    assert sorted(names) == sorted(spec["name"] for spec in MANSION_ROOMS)


def test_child_rejects_unknown_direction():
    with pytest.raises(ValueError):
        create_room("Hall").child("up")


def test_single_room_table():
    room = build_mansion([{"name": "Cela"}], [])
    assert room.name == "Cela"
    assert not room.has_clue


@pytest.mark.parametrize(
    "links",
    [
        [(0, 1, 9)],  # unknown index
        [(0, 1, 2), (1, 2, None)],  # room with two parents
        [(0, 1, None)],  # room 2 unreachable
        [(0, 1, 2), (0, None, None)],  # parent linked twice
        [(0, 0, None)],  # root as a child
        [(1, 2, None), (2, 1, None)],  # loop detached from the root
    ],
)
def test_malformed_tables_are_rejected(links):
    rooms = [{"name": "A"}, {"name": "B"}, {"name": "C"}]
    with pytest.raises(ValueError):
        build_mansion(rooms, links)


def test_empty_table_is_rejected():
    with pytest.raises(ValueError):
        build_mansion([], [])
