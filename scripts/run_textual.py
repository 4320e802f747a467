from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from textual.logging import TextualHandler

from detective_quest import config
from detective_quest.domain.errors import ContentError, MapBuildError
from detective_quest.ui.app import MansionApp


def main() -> int:
    parser = argparse.ArgumentParser(description="Textual wrapper for the mansion investigation.")
    parser.add_argument("--content", type=Path, default=None, help="Mansion YAML document.")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()
    config.configure_logging(args.log_level, handlers=[TextualHandler()])

    try:
        app = MansionApp(content_path=args.content)
    except (ContentError, MapBuildError) as exc:
        print(f"Erro ao montar a mansao: {exc}", file=sys.stderr)
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
