"""Investigation session: exploration, review and accusation."""

from .events import SessionEvent
from .session import InvestigationSession, Presenter
from .verdict import AccusationResult, tally_evidence, verdict_for

__all__ = [
    "AccusationResult",
    "InvestigationSession",
    "Presenter",
    "SessionEvent",
    "tally_evidence",
    "verdict_for",
]
