from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from detective_quest.clue_registry import ClueRegistry
from detective_quest.config import Settings
from detective_quest.exploration import ExplorationSession, explore
from detective_quest.log import logger, setup_logger
from detective_quest.rooms import build_mansion
from detective_quest.ruleset import CLUE_SUSPECTS
from detective_quest.suspect_directory import SuspectDirectory
from detective_quest.verdict import render_verdict


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore the mansion, collect clues and accuse the culprit.",
    )


def play(stdin: TextIO, stdout: TextIO) -> None:
    mansion = build_mansion()
    directory = SuspectDirectory.from_pairs(CLUE_SUSPECTS)
    registry = ClueRegistry()

    print("=== Detective Quest: Investigacao Final ===", file=stdout)
    print("Explore a mansão e colete pistas. Quando terminar, acuse o suspeito.", file=stdout)

    explore(ExplorationSession(mansion, registry), stdin, stdout)
    render_verdict(registry, directory, stdin, stdout)

    print("\nObrigado por jogar Detective Quest!", file=stdout)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    build_parser().parse_args(argv)
    settings = Settings.from_env()
    try:
        setup_logger(settings.log_level, settings.log_file)
    except (ValueError, OSError) as exc:
        # bad log settings must not stop the game
        print(f"WARNING: logging not configured ({exc}); using defaults.", file=sys.stderr, flush=True)
        setup_logger()

    try:
        play(stdin or sys.stdin, stdout or sys.stdout)
    except MemoryError:
        logger.error("memory exhausted while running the game")
        print("Erro de alocacao de memoria.", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
