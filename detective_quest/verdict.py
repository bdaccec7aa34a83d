"""Final accusation: tally the collected clues that point at the accused."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from detective_quest.clue_registry import ClueRegistry
from detective_quest.log import logger
from detective_quest.ruleset import GUILTY_THRESHOLD
from detective_quest.suspect_directory import SuspectDirectory


class InvalidAccusation(ValueError):
    pass


@dataclass(frozen=True)
class Verdict:
    accused: str
    count: int

    @property
    def guilty(self) -> bool:
        return self.count >= GUILTY_THRESHOLD

    def sentence(self) -> str:
        if self.guilty:
            return f"VEREDICTO: Há pistas suficientes! {self.accused} é considerado culpado."
        return f"VEREDICTO: Pistas insuficientes. {self.accused} não pode ser acusado com segurança."


def count_matching_clues(registry: ClueRegistry, directory: SuspectDirectory, accused: str) -> int:
    count = 0
    for clue in registry.traverse_in_order():
        if directory.lookup(clue) == accused:
            count += 1
    return count


def judge(registry: ClueRegistry, directory: SuspectDirectory, accused: str) -> Verdict:
    """Build the verdict for an accusation line.

    Only the line terminator is removed; the name is otherwise compared
    exactly, case and inner spaces included.
    """
    name = accused.rstrip("\r\n")
    if not name.strip():
        raise InvalidAccusation("Nenhum nome fornecido. Acusação inválida.")
    verdict = Verdict(accused=name, count=count_matching_clues(registry, directory, name))
    logger.debug("verdict for %s: %d clue(s), guilty=%s", name, verdict.count, verdict.guilty)
    return verdict


def render_verdict(
    registry: ClueRegistry, directory: SuspectDirectory, stdin: TextIO, stdout: TextIO
) -> Optional[Verdict]:
    print("\n===== Pistas coletadas (ordem alfabética) =====", file=stdout)
    if not registry:
        print("Nenhuma pista coletada.", file=stdout)
    for clue in registry:
        print(f" - {clue}", file=stdout)

    print("\nQuem você acusa como culpado? (escreva o nome exato): ", end="", file=stdout, flush=True)
    line = stdin.readline()
    if not line:
        print("Erro na leitura. Encerrando verificação.", file=stdout)
        return None

    try:
        verdict = judge(registry, directory, line)
    except InvalidAccusation as exc:
        print(str(exc), file=stdout)
        return None

    print(f"\nAcusado: {verdict.accused}", file=stdout)
    print(f"Pistas que apontam para {verdict.accused}: {verdict.count}", file=stdout)
    print(f"\n{verdict.sentence()}", file=stdout)
    return verdict
