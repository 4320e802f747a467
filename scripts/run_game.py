from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from detective_quest import config
from detective_quest.content import load_content
from detective_quest.domain.errors import ContentError, MapBuildError
from detective_quest.investigation.session import InvestigationSession
from detective_quest.ui.console import BANNER, ConsolePresenter


def main() -> int:
    parser = argparse.ArgumentParser(description="Explore the mansion in the console.")
    parser.add_argument("--content", type=Path, default=None, help="Mansion YAML document.")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    parser.add_argument(
        "--threshold",
        type=config.positive_int,
        default=config.EVIDENCE_THRESHOLD,
        help="Clues needed to close the case.",
    )
    args = parser.parse_args()
    config.configure_logging(args.log_level)

    try:
        content = load_content(args.content)
        session = InvestigationSession.from_content(content, threshold=args.threshold)
    except (ContentError, MapBuildError) as exc:
        print(f"Erro ao montar a mansao: {exc}", file=sys.stderr)
        return 1

    print(BANNER)
    try:
        session.run(ConsolePresenter())
    except KeyboardInterrupt:
        print("\nSaindo da mansao... Ate a proxima!")
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
