from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Input, RichLog, Static

from detective_quest.content import load_content
from detective_quest.domain.enums import Phase
from detective_quest.domain.errors import InvalidInput
from detective_quest.investigation.events import SessionEvent
from detective_quest.investigation.session import InvestigationSession
from detective_quest.ui.console import BANNER, format_event, parse_direction


class MansionApp(App):
    TITLE = "Detective Quest"
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f7", "focus_detail", "Focus detail"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 2fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail_view {
        width: 100%;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        content_path: Path | None = None,
        session: InvestigationSession | None = None,
    ) -> None:
        super().__init__()
        if session is None:
            content = load_content(content_path)
            session = InvestigationSession.from_content(content)
        self.session = session
        self._pending: list[SessionEvent] = []
        self._has_mounted = False
        self.session.subscribe(self._on_session_event)

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True)
            yield VerticalScroll(Static("", id="detail_view", expand=True), id="detail")
            yield Input(placeholder="e / d / s", id="command")

    def on_mount(self) -> None:
        for line in BANNER.splitlines():
            self._write(line)
        self._has_mounted = True
        for event in self._pending:
            self._show_event(event)
        self._pending = []
        if self.session.phase == Phase.EXPLORING:
            self.session.start()
        self._advance()
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        self.session.unsubscribe(self._on_session_event)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if self.session.phase == Phase.EXPLORING:
            if not value:
                return
            try:
                direction = parse_direction(value)
            except InvalidInput as exc:
                self.session.reject_input(exc)
                return
            self.session.choose(direction)
            self._advance()
            return
        if self.session.phase == Phase.ACCUSING:
            self.session.accuse(value)
            self._advance()
            return
        if value.lower() == "q":
            self.exit(self.session.result)

    def _advance(self) -> None:
        if self.session.phase == Phase.REVIEWING:
            self.session.review()
        command = self.query_one("#command", Input)
        if self.session.phase == Phase.ACCUSING:
            command.placeholder = "Nome do suspeito"
            self._write("Quem voce acusa?")
        elif self.session.phase == Phase.FINISHED:
            command.placeholder = "q para sair"
            self._write("Digite 'q' para sair.")
        self._refresh_header()
        self._refresh_detail()

    def _on_session_event(self, event: SessionEvent) -> None:
        if not self._has_mounted:
            self._pending.append(event)
            return
        self._show_event(event)

    def _show_event(self, event: SessionEvent) -> None:
        for line in format_event(event):
            self._write(line)

    def _write(self, message: str) -> None:
        log = self.query_one("#log", RichLog)
        log.write(message)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_detail(self) -> None:
        self.query_one("#detail", VerticalScroll).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _refresh_header(self) -> None:
        header = self.query_one("#header", Static)
        session = self.session
        lines = [
            f"Sala: {session.current.name}  Fase: {session.phase}  "
            f"Pistas: {len(session.clues)}  Limite de evidencia: {session.threshold}"
        ]
        if session.result is not None:
            lines.append(f"Veredito: {session.result.verdict}")
        header.update("\n".join(lines))

    def _refresh_detail(self) -> None:
        detail = self.query_one("#detail_view", Static)
        lines = ["Caderno de pistas"]
        clues = list(self.session.clues.in_order())
        if not clues:
            lines.append("(nenhuma)")
        for idx, clue in enumerate(clues, start=1):
            lines.append(f"{idx}) {clue}")
        lines.append("")
        lines.append("Caminho percorrido:")
        lines.append(" -> ".join(self.session.visited) or "(nenhum)")
        detail.update("\n".join(lines))
