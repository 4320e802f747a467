"""Evidence tally and verdict for the accusation phase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from detective_quest import config
from detective_quest.domain.enums import Verdict
from detective_quest.evidence.suspects import SuspectLookup


@dataclass(frozen=True)
class AccusationResult:
    accused: str
    evidence: tuple[str, ...]
    threshold: int = config.EVIDENCE_THRESHOLD

    @property
    def count(self) -> int:
        return len(self.evidence)

    @property
    def verdict(self) -> Verdict:
        return verdict_for(self.count, self.threshold)

    @property
    def summary(self) -> str:
        if self.verdict == Verdict.CASE_CLOSED:
            return (
                f"Caso encerrado: {self.accused} e culpado(a) "
                f"com {self.count} pista(s) de evidencia."
            )
        return (
            f"Inconclusivo: apenas {self.count} pista(s) apontam para {self.accused or 'ninguem'}; "
            f"sao necessarias {self.threshold}."
        )


def verdict_for(count: int, threshold: int = config.EVIDENCE_THRESHOLD) -> Verdict:
    if count >= threshold:
        return Verdict.CASE_CLOSED
    return Verdict.INCONCLUSIVE


def tally_evidence(
    clues: Iterable[str],
    suspects: SuspectLookup,
    accused: str,
    threshold: int = config.EVIDENCE_THRESHOLD,
) -> AccusationResult:
    """Keep every clue whose suspect is exactly the accused name."""
    if threshold < 1:
        raise ValueError("threshold must be at least 1")
    accused = accused.strip()
    evidence: list[str] = []
    if accused:
        for clue in clues:
            if suspects.lookup(clue) == accused:
                evidence.append(clue)
    return AccusationResult(accused=accused, evidence=tuple(evidence), threshold=threshold)
