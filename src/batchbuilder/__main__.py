import argparse
import sys
from pathlib import Path

from batchbuilder.app import run_app
from batchbuilder.core.arguments import ArgumentStore


def build_parser() -> argparse.ArgumentParser:
    # Engine flags (-batchmode, -buildtarget, ...) are single-dash and read
    # straight from the raw vector, so only host options live here.
    parser = argparse.ArgumentParser(prog="batchbuilder", allow_abbrev=False)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Builder settings file (defaults to the per-user config).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    tokens = list(sys.argv) if argv is None else ["batchbuilder", *argv]
    args, _unknown = build_parser().parse_known_args(tokens[1:])
    return run_app(arguments=ArgumentStore.from_tokens(tokens), config_file=args.config)


if __name__ == "__main__":
    raise SystemExit(main())
