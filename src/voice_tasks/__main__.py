"""Entry point for ``python -m voice_tasks``.

Parses one voice command given on the command line and prints the
resulting task.  Uses stdlib :mod:`argparse` for argument parsing.

Exit codes:
    0 -- The command was parsed (parsing itself never fails).
    1 -- Blank transcript, invalid ``--now``, or a configuration error.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime

from voice_tasks.config import ConfigError, load_settings
from voice_tasks.log import setup_logging
from voice_tasks.output import print_parse_result
from voice_tasks.pipeline import VoiceCommandParser


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="voice-tasks",
        description="Turn a spoken command into a structured task.",
    )
    parser.add_argument(
        "transcript",
        nargs="+",
        help="The voice transcript; multiple words are joined with spaces.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        default=False,
        help="Skip the language model and use only the rule-based parser.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON instead of a report.",
    )
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="ISO 8601 date/time to resolve relative dates against.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the voice-tasks CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])

    setup_logging("DEBUG" if args.verbose else "INFO")

    transcript = " ".join(args.transcript).strip()
    if not transcript:
        print("Error: Transcript is empty", file=sys.stderr)
        return 1

    now = None
    if args.now is not None:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            print(f"Error: Invalid --now value: {args.now!r}", file=sys.stderr)
            return 1

    if args.offline:
        voice_parser = VoiceCommandParser()
    else:
        try:
            settings = load_settings()
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        setup_logging("DEBUG" if args.verbose else settings.log_level)
        voice_parser = VoiceCommandParser.from_settings(settings)

    result = voice_parser.parse(transcript, now=now)

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print_parse_result(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
