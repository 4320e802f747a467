"""Blocking console front end."""

from __future__ import annotations

from typing import Callable

from detective_quest.domain.enums import Direction, EventKind
from detective_quest.domain.errors import InvalidInput
from detective_quest.investigation.events import SessionEvent

DIRECTION_TOKENS = {
    "e": Direction.LEFT,
    "esquerda": Direction.LEFT,
    "l": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "direita": Direction.RIGHT,
    "r": Direction.RIGHT,
    "right": Direction.RIGHT,
    "s": Direction.EXIT,
    "sair": Direction.EXIT,
    "x": Direction.EXIT,
    "exit": Direction.EXIT,
}

DIRECTION_KEYS = {
    Direction.LEFT: ("e", "Esquerda"),
    Direction.RIGHT: ("d", "Direita"),
}

BANNER = (
    "### BEM-VINDO(A) AO DETECTIVE QUEST: MAPA DA MANSAO ###\n"
    "Inicie sua exploracao a partir do Hall de entrada.\n"
    + "-" * 67
)


def parse_direction(token: str) -> Direction:
    direction = DIRECTION_TOKENS.get(token.strip().lower())
    if direction is None:
        raise InvalidInput(token)
    return direction


def format_event(event: SessionEvent) -> list[str]:
    if event.kind == EventKind.ROOM_ENTERED:
        return ["", f"=> {event.message}"]
    if event.kind == EventKind.DIRECTIONS_OFFERED:
        lines = [event.message]
        for direction, target in event.directions.items():
            key, label = DIRECTION_KEYS[direction]
            lines.append(f"  [{key}] {label} (para {target})")
        lines.append("  [s] Sair da mansao")
        return lines
    if event.kind == EventKind.LEAF_REACHED:
        return ["", "--- FIM DA LINHA ---", event.message]
    if event.kind == EventKind.CLUES_REVIEWED:
        return ["", event.message, *(f"- {clue}" for clue in event.clues)]
    if event.kind == EventKind.VERDICT_REACHED:
        return ["", event.message]
    return [event.message]


class ConsolePresenter:
    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self._input = input_func or input
        self._output = output or print

    def prompt_direction(self, available: tuple[Direction, ...]) -> Direction:
        keys = "/".join(DIRECTION_KEYS[direction][0] for direction in available)
        prompt = f"Sua escolha ({keys}/s): " if keys else "Sua escolha (s): "
        try:
            token = self._input(prompt)
        except EOFError:
            return Direction.EXIT
        return parse_direction(token)

    def prompt_accusation(self) -> str:
        try:
            return self._input("Quem voce acusa? ").strip()
        except EOFError:
            return ""

    def present(self, event: SessionEvent) -> None:
        for line in format_event(event):
            self._output(line)
