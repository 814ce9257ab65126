"""Console formatter for parse results.

:func:`format_parse_result` returns the report as a string;
:func:`print_parse_result` writes it to stdout.
"""

from __future__ import annotations

import sys

from voice_tasks.models.task import VoiceParseResult

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


def format_parse_result(result: VoiceParseResult) -> str:
    """Render a :class:`VoiceParseResult` for the terminal.

    The report shows the transcript, every task field, the confidence
    label, and where the result came from.

    Args:
        result: The parse result to format.

    Returns:
        A multi-line string ready for console display.
    """
    parsed = result.parsed
    lines: list[str] = [
        _SEPARATOR,
        "  VOICE COMMAND -> TASK",
        _SEPARATOR,
        "",
        f'  Transcript: "{result.transcript}"',
        "",
        "--- TASK ---",
        f"  Title:    {parsed.title}",
        f"  Priority: {parsed.priority}",
        f"  Due date: {_or_dash(parsed.due_date.isoformat() if parsed.due_date else None)}",
        f"  Due time: {_or_dash(parsed.due_time)}",
        f"  Status:   {parsed.status}",
        "",
        "--- EXTRACTION ---",
        f"  Confidence: {result.confidence}",
        f"  Source:     {_source_label(result)}",
        _SEPARATOR,
    ]
    return "\n".join(lines)


def print_parse_result(result: VoiceParseResult) -> None:
    """Format and print a :class:`VoiceParseResult` to stdout."""
    sys.stdout.write(format_parse_result(result) + "\n")


def _source_label(result: VoiceParseResult) -> str:
    if result.raw_response is None:
        return "rule-based parser (model not reached)"
    return f"language model ({len(result.raw_response)} chars of output)"


def _or_dash(value: str | None) -> str:
    return value if value else "-"
