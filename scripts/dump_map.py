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
from detective_quest.evidence.suspects import SuspectLookup
from detective_quest.mansion import build_room_tree, render_map


def dump_lookup(table: SuspectLookup) -> str:
    lines = [f"Tabela de suspeitos ({len(table)} pistas, {table.bucket_count} baldes):"]
    for index in range(table.bucket_count):
        chain = " -> ".join(f"{entry.key!r}: {entry.suspect}" for entry in table.chain(index))
        lines.append(f"[{index}] {chain or '-'}")
    lines.append("")
    lines.append("Suspeitos: " + ", ".join(table.suspects()))
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the mansion map and suspect table.")
    parser.add_argument("--content", type=Path, default=None)
    parser.add_argument("--buckets", type=config.positive_int, default=config.SUSPECT_BUCKETS)
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()
    config.configure_logging(args.log_level)

    try:
        content = load_content(args.content)
        tree = build_room_tree(content)
    except (ContentError, MapBuildError) as exc:
        print(f"Erro ao montar a mansao: {exc}", file=sys.stderr)
        return 1

    output = "\n".join(
        [
            render_map(tree, show_clues=True),
            "",
            dump_lookup(SuspectLookup.from_links(content.suspects, args.buckets)),
        ]
    )
    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote map dump to {args.out}")
        return 0
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
