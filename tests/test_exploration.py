import io

import pytest

from detective_quest.clue_registry import ClueRegistry
from detective_quest.exploration import EXIT, LEFT, RIGHT, ExplorationSession, explore, parse_command
from detective_quest.rooms import build_mansion, create_room


@pytest.fixture
def session():
    return ExplorationSession(build_mansion(), ClueRegistry())


def run(session, text):
    out = io.StringIO()
    explore(session, io.StringIO(text), out)
    return out.getvalue()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("e\n", LEFT),
        ("E\n", LEFT),
        ("d", RIGHT),
        ("D\n", RIGHT),
        ("s\n", EXIT),
        ("  S  \n", EXIT),
        ("esquerda\n", LEFT),
        ("x\n", None),
        ("\n", None),
        ("", None),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) == expected


def test_enter_collects_clue(session):
    assert session.enter() == "Pegada suja"
    assert session.registry.to_list() == ["Pegada suja"]
    assert session.visited == ["Hall de Entrada"]


def test_reentering_a_room_does_not_duplicate_clue(session):
    session.enter()
    session.enter()
    assert len(session.registry) == 1


def test_room_without_clue():
    session = ExplorationSession(create_room("Corredor"))
    assert session.enter() is None
    assert len(session.registry) == 0


def test_move_to_existing_child(session):
    assert session.move(LEFT) is True
    assert session.current.name == "Sala de Estar"


def test_blocked_move_keeps_room(session):
    session.move(RIGHT)
    assert session.move(LEFT) is False
    assert session.current.name == "Biblioteca"


def test_exit_ends_session(session):
    session.exit()
    assert session.exited
    with pytest.raises(ValueError):
        session.enter()
    with pytest.raises(ValueError):
        session.move(LEFT)


def test_walk_to_kitchen_collects_three_clues(session):
    output = run(session, "e\ne\ns\n")
    assert session.exited
    assert set(session.registry) == {
        "Pegada suja",
        "Perfume feminino caro",
        "Copo com fragmento de esmalte",
    }
    assert 'Pista encontrada: "Copo com fragmento de esmalte"' in output
    assert output.strip().endswith("Exploração encerrada pelo jogador.")


def test_exit_from_hall(session):
    run(session, "s\n")
    assert session.registry.to_list() == ["Pegada suja"]


def test_blocked_left_stays_in_same_room(session):
    output = run(session, "d\ne\ns\n")
    assert "Não há caminho à esquerda." in output
    after_block = output.split("Não há caminho à esquerda.")[1]
    assert "Você entrou na sala: Biblioteca" in after_block
    assert session.visited == ["Hall de Entrada", "Biblioteca", "Biblioteca"]


def test_blocked_right_message():
    session = ExplorationSession(create_room("Cela"))
    output = run(session, "d\ns\n")
    assert "Não há caminho à direita." in output


def test_invalid_command_reprompts(session):
    output = run(session, "x\ns\n")
    assert "Opção inválida. Use e, d ou s." in output
    assert output.count("Você entrou na sala: Hall de Entrada") == 2


def test_blank_lines_are_skipped(session):
    output = run(session, "\n\n   \ne\ns\n")
    assert "Opção inválida" not in output
    assert "Você entrou na sala: Sala de Estar" in output


def test_end_of_input_ends_exploration(session):
    output = run(session, "e\n")
    assert session.exited
    assert "Entrada inválida. Encerrando." in output
    assert session.registry.to_list() == ["Pegada suja", "Perfume feminino caro"]


def test_room_without_clue_is_reported():
    session = ExplorationSession(create_room("Corredor"))
    output = run(session, "s\n")
    assert "(Nenhuma pista nesta sala)" in output
