"""Command line front end for hangul_typing.

Examples:
    python main.py disassemble "각나"
    python main.py disassemble "각나" | python main.py assemble
    python main.py frames "안녕\\n하세요"

Escape literals (backslash + b, backslash + n) are passed as two characters.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml

from hangul_typing.domain import (
    InvalidInput,
    InvalidUnitRecord,
    assemble,
    disassemble,
    unit_from_record,
    unit_to_record,
)
from hangul_typing.services import SettingsStore, TypingSession

logger = logging.getLogger("hangul_typing")

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "settings.yaml")


# -------------------------------------------------
#           SUBCOMMANDS
# -------------------------------------------------

def _cmd_disassemble(args: argparse.Namespace) -> int:
    records = [unit_to_record(u) for u in disassemble(args.text)]
    yaml.safe_dump(records, sys.stdout, allow_unicode=True, sort_keys=False)
    return 0


def _cmd_assemble(args: argparse.Namespace) -> int:
    if args.file in (None, "-"):
        data = yaml.safe_load(sys.stdin)
    else:
        with open(args.file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    if data is None:
        data = []
    if not isinstance(data, list):
        raise InvalidUnitRecord("Expected a YAML list of unit records")

    units = [unit_from_record(r) for r in data]
    print(assemble(units))
    return 0


def _cmd_frames(args: argparse.Namespace) -> int:
    config = SettingsStore(args.settings).get_typing_config()
    session = TypingSession(args.text, config)
    for frame in session.frames():
        # One output line per frame; line breaks inside a frame are shown escaped.
        print(frame.display().replace("\n", "\\n"))
    return 0


# -------------------------------------------------
#           ENTRY POINT
# -------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Disassemble and reassemble Hangul typing units.")
    parser.add_argument("--settings", default=SETTINGS_PATH, help="Path to settings.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("disassemble", help="Print the typing units of TEXT as YAML.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_disassemble)

    p = sub.add_parser("assemble", help="Assemble YAML unit records into text.")
    p.add_argument("file", nargs="?", default=None, help="YAML file (default: stdin).")
    p.set_defaults(func=_cmd_assemble)

    p = sub.add_parser("frames", help="Print the text shown after each revealed unit.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_frames)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.func(args))
    except (InvalidInput, InvalidUnitRecord, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print("error: {}".format(e), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
