from __future__ import annotations

from typing import List, Optional, TextIO

from detective_quest.clue_registry import ClueRegistry
from detective_quest.log import logger
from detective_quest.rooms import Room

LEFT = "left"
RIGHT = "right"
EXIT = "exit"

COMMANDS = {"e": LEFT, "d": RIGHT, "s": EXIT}

BLOCKED_MESSAGES = {
    LEFT: "Não há caminho à esquerda.",
    RIGHT: "Não há caminho à direita.",
}


def parse_command(text: str) -> Optional[str]:
    """Map the first non-blank character of a line to a command, ignoring case."""
    stripped = text.strip()
    if not stripped:
        return None
    return COMMANDS.get(stripped[0].lower())


class ExplorationSession:
    """Where the player stands in the mansion and what they have picked up."""

    def __init__(self, root: Room, registry: Optional[ClueRegistry] = None) -> None:
        self.current: Optional[Room] = root
        self.registry = registry if registry is not None else ClueRegistry()
        self.visited: List[str] = []

    @property
    def exited(self) -> bool:
        return self.current is None

    def enter(self) -> Optional[str]:
        """Collect the current room's clue, if it has one, and return it."""
        room = self._require_room()
        self.visited.append(room.name)
        logger.debug("entered room: %s", room.name)
        if not room.has_clue:
            return None
        if self.registry.insert(room.clue):
            logger.debug("clue collected: %s", room.clue)
        return room.clue

    def move(self, direction: str) -> bool:
        room = self._require_room()
        nxt = room.child(direction)
        if nxt is None:
            logger.debug("no path %s from %s", direction, room.name)
            return False
        self.current = nxt
        return True

    def exit(self) -> None:
        self.current = None

    def _require_room(self) -> Room:
        if self.current is None:
            raise ValueError("Exploration already finished")
        return self.current


def explore(session: ExplorationSession, stdin: TextIO, stdout: TextIO) -> None:
    """Run the interactive walk until the player leaves or input runs out."""
    while True:
        room = session.current
        if room is None:
            break
        print(f"\nVocê entrou na sala: {room.name}", file=stdout)
        clue = session.enter()
        if clue is not None:
            print(f'  Pista encontrada: "{clue}"', file=stdout)
        else:
            print("  (Nenhuma pista nesta sala)", file=stdout)

        print("\nEscolha: (e) esquerda  (d) direita  (s) sair", file=stdout)
        print("Opcao: ", end="", file=stdout, flush=True)
        line = _read_command_line(stdin)
        if line is None:
            print("Entrada inválida. Encerrando.", file=stdout)
            session.exit()
            break

        command = parse_command(line)
        if command == EXIT:
            print("Exploração encerrada pelo jogador.", file=stdout)
            session.exit()
        elif command in BLOCKED_MESSAGES:
            if not session.move(command):
                print(BLOCKED_MESSAGES[command], file=stdout)
        else:
            print("Opção inválida. Use e, d ou s.", file=stdout)


def _read_command_line(stdin: TextIO) -> Optional[str]:
    # blank lines do not count as an answer
    while True:
        line = stdin.readline()
        if not line:
            return None
        if line.strip():
            return line
