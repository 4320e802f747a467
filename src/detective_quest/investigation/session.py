"""Investigation session: the explore -> review -> accuse state machine."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from detective_quest import config
from detective_quest.domain.enums import Direction, EventKind, InsertStatus, Phase
from detective_quest.domain.errors import InvalidInput, NoSuchPath, PhaseError
from detective_quest.domain.models import MansionContent
from detective_quest.evidence.clue_index import ClueIndex
from detective_quest.evidence.suspects import SuspectLookup
from detective_quest.investigation.events import SessionEvent
from detective_quest.investigation.verdict import AccusationResult, tally_evidence
from detective_quest.mansion.rooms import Room, RoomTree, build_room_tree

logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent], None]


class Presenter(Protocol):
    def prompt_direction(self, available: tuple[Direction, ...]) -> Direction:
        """Return a choice; raise InvalidInput for an unreadable token."""

    def prompt_accusation(self) -> str:
        ...

    def present(self, event: SessionEvent) -> None:
        ...


class InvestigationSession:
    """
    One player's run through the mansion.

    The session owns the room tree, the clue index and the suspect table.
    Front ends either call the step methods (``start``, ``choose``,
    ``review``, ``accuse``) or hand a blocking presenter to ``run``.
    """

    def __init__(
        self,
        rooms: RoomTree,
        suspects: SuspectLookup,
        threshold: int = config.EVIDENCE_THRESHOLD,
    ) -> None:
        if rooms.root is None:
            raise ValueError("room tree is empty")
        if threshold < 1:
            raise ValueError("threshold must be at least 1")
        self.rooms = rooms
        self.suspects = suspects
        self.clues = ClueIndex()
        self.threshold = threshold
        self.current: Room = rooms.root
        self.phase = Phase.EXPLORING
        self.result: AccusationResult | None = None
        self.events: list[SessionEvent] = []
        self.visited: list[str] = []
        self._listeners: list[Listener] = []
        self._started = False

    @classmethod
    def from_content(
        cls,
        content: MansionContent,
        bucket_count: int = config.SUSPECT_BUCKETS,
        threshold: int = config.EVIDENCE_THRESHOLD,
    ) -> "InvestigationSession":
        rooms = build_room_tree(content)
        suspects = SuspectLookup.from_links(content.suspects, bucket_count)
        return cls(rooms, suspects, threshold=threshold)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, kind: EventKind, message: str, **details) -> SessionEvent:
        event = SessionEvent(kind=kind, message=message, **details)
        self.events.append(event)
        for listener in list(self._listeners):
            listener(event)
        return event

    def _require(self, phase: Phase) -> None:
        if self.phase != phase:
            raise PhaseError(f"expected phase {phase}, session is {self.phase}")

    @property
    def finished(self) -> bool:
        return self.phase == Phase.FINISHED

    def available_directions(self) -> tuple[Direction, ...]:
        return self.rooms.children(self.current)

    def start(self) -> None:
        """Enter the root room. Later calls do nothing."""
        self._require(Phase.EXPLORING)
        if self._started:
            return
        self._started = True
        self._enter_room()

    def _enter_room(self) -> None:
        """Arrive at the current room: collect its clue, then offer doors or end at a leaf."""
        room = self.current
        self.visited.append(room.name)
        self._emit(EventKind.ROOM_ENTERED, f"Voce esta no(a): {room.name}", room=room.name)
        clue = self.rooms.collect_clue(room)
        if clue is not None:
            self.clues.insert(clue)
            if self.clues.last_insert == InsertStatus.ADDED:
                self._emit(EventKind.CLUE_FOUND, f"Pista encontrada: {clue}", room=room.name, clue=clue)
            elif self.clues.last_insert == InsertStatus.DROPPED:
                self._emit(
                    EventKind.CLUE_DROPPED,
                    f"Nao foi possivel anotar a pista: {clue}",
                    room=room.name,
                    clue=clue,
                )
            else:
                self._emit(
                    EventKind.CLUE_REPEATED,
                    f"Pista ja anotada: {clue}",
                    room=room.name,
                    clue=clue,
                )
        if room.is_leaf:
            self._emit(
                EventKind.LEAF_REACHED,
                "Fim da linha: este comodo nao tem mais caminhos.",
                room=room.name,
            )
            self.phase = Phase.REVIEWING
            return
        directions = {
            direction: self.rooms.peek(room, direction) for direction in self.available_directions()
        }
        self._emit(
            EventKind.DIRECTIONS_OFFERED,
            "Para onde voce gostaria de ir?",
            room=room.name,
            directions=directions,
        )

    def choose(self, direction: Direction) -> None:
        self._require(Phase.EXPLORING)
        if not self._started:
            self.start()
        if direction == Direction.EXIT:
            self._emit(EventKind.EXITED, "Saindo da mansao...", room=self.current.name)
            self.phase = Phase.REVIEWING
            return
        try:
            self.current = self.rooms.move(self.current, direction)
        except NoSuchPath as exc:
            logger.debug("Rejected move: %s", exc)
            self._emit(
                EventKind.PATH_REJECTED,
                f"Nao ha caminho para {_direction_label(direction)} a partir de {exc.room}.",
                room=exc.room,
            )
            return
        self._enter_room()

    def exit_mansion(self) -> None:
        self.choose(Direction.EXIT)

    def reject_input(self, error: InvalidInput) -> None:
        self._emit(
            EventKind.INPUT_REJECTED,
            f"Escolha invalida ({error.token!r}). Digite 'e', 'd' ou 's'.",
            room=self.current.name,
        )

    def review(self) -> list[str]:
        """Present collected clues in order; with none the case ends here."""
        self._require(Phase.REVIEWING)
        collected = list(self.clues.in_order())
        if not collected:
            self._emit(EventKind.NO_CLUES, "Nenhuma pista coletada. Nao ha como acusar ninguem.")
            self.phase = Phase.FINISHED
            return collected
        self._emit(
            EventKind.CLUES_REVIEWED,
            f"Pistas coletadas ({len(collected)}):",
            clues=tuple(collected),
        )
        self.phase = Phase.ACCUSING
        return collected

    def accuse(self, accused: str) -> AccusationResult:
        self._require(Phase.ACCUSING)
        result = tally_evidence(self.clues.in_order(), self.suspects, accused, self.threshold)
        for clue in result.evidence:
            self._emit(
                EventKind.EVIDENCE_MATCHED,
                f"Evidencia contra {result.accused}: {clue}",
                clue=clue,
            )
        self.result = result
        self.phase = Phase.FINISHED
        self._emit(EventKind.VERDICT_REACHED, result.summary)
        logger.info(
            "Accused %s with %d piece(s) of evidence: %s", result.accused, result.count, result.verdict
        )
        return result

    def run(self, presenter: Presenter) -> AccusationResult | None:
        """Drive the whole session with a blocking presenter."""
        self.subscribe(presenter.present)
        try:
            self.start()
            while self.phase == Phase.EXPLORING:
                try:
                    direction = presenter.prompt_direction(self.available_directions())
                except InvalidInput as exc:
                    self.reject_input(exc)
                    continue
                self.choose(direction)
            self.review()
            if self.phase == Phase.ACCUSING:
                self.accuse(presenter.prompt_accusation())
            return self.result
        finally:
            self.unsubscribe(presenter.present)

    def close(self) -> None:
        self.rooms.teardown()
        self.clues.clear()


def _direction_label(direction: Direction) -> str:
    return {Direction.LEFT: "a esquerda", Direction.RIGHT: "a direita"}.get(direction, str(direction))
