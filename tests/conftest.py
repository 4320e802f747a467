from __future__ import annotations

import pytest

from detective_quest.content import load_content, parse_content
from detective_quest.domain.models import MansionContent
from detective_quest.investigation.session import InvestigationSession
from detective_quest.ui.console import ConsolePresenter


@pytest.fixture()
def content() -> MansionContent:
    return load_content()


@pytest.fixture()
def session(content) -> InvestigationSession:
    return InvestigationSession.from_content(content)


@pytest.fixture()
def small_content() -> MansionContent:
    return parse_content(
        {
            "root": "A",
            "rooms": [
                {"name": "A", "left": "B"},
                {"name": "B", "clue": "pista b", "right": "C"},
                {"name": "C", "clue": "pista c"},
            ],
            "suspects": [
                {"clue": "pista b", "suspect": "X"},
                {"clue": "pista c", "suspect": "X"},
            ],
        }
    )


@pytest.fixture()
def scripted():
    """Console presenter fed from a list of answers, output captured in a list."""

    def _make(answers: list[str]) -> tuple[ConsolePresenter, list[str]]:
        pending = iter(answers)
        output: list[str] = []

        def _input(prompt: str) -> str:
            output.append(prompt)
            try:
                return next(pending)
            except StopIteration:
                raise EOFError from None

        return ConsolePresenter(input_func=_input, output=output.append), output

    return _make
