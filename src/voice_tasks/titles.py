"""Turn a spoken command into a clean task title.

Titles are cleaned by :data:`TITLE_RULES`, an ordered list of regex
rules.  Each rule runs on the output of the previous one, so the order
matters: the trailing "it's urgent" clause must go before the date and
time words it may follow, and "by tomorrow" must go before the bare
"tomorrow" rule can leave a dangling "by".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from voice_tasks.dates import TIME_OF_DAY, WEEKDAYS

# Only the phrases the date and time resolvers read are stripped.
_RELATIVE_DATE = (
    r"(?:today|tomorrow|next\s+(?:" + "|".join(WEEKDAYS) + r")|in\s+\d+\s+days?)"
)
_TIME_OF_DAY = r"(?:tonight|" + "|".join(word for word, _ in TIME_OF_DAY) + r")"

UNTITLED = "Untitled task"


@dataclass(frozen=True)
class TitleRule:
    """A single named rewrite step.

    Attributes:
        name: Short identifier, used in tests and debug output.
        pattern: Compiled pattern to search for.
        replacement: Replacement text (usually empty).
        count: Maximum replacements; ``0`` replaces every match.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""
    count: int = 0

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text, count=self.count)


def _rule(name: str, pattern: str, replacement: str = "", count: int = 0) -> TitleRule:
    return TitleRule(name, re.compile(pattern, re.IGNORECASE), replacement, count)


TITLE_RULES: tuple[TitleRule, ...] = (
    _rule(
        "command_scaffolding",
        r"^\s*(?:please\s+)?(?:create|add|make|new)\s+(?:a\s+)?(?:new\s+)?"
        r"(?:task\s+)?(?:to\s+)?",
        count=1,
    ),
    _rule(
        "priority_phrase",
        r",?\s*\b(?:with\s+)?(?:urgent|critical|high|low|medium|important)\s*priority\b",
    ),
    _rule(
        "trailing_priority",
        r"[,.;]?\s*\b(?:(?:it['’]?s|it\s+is|this\s+is|that['’]?s|mark\s+it(?:\s+as)?)\s+)?"
        r"(?:very\s+|really\s+|super\s+)?(?:urgent|critical|important)\b[\s.!]*$",
        count=1,
    ),
    _rule("by_relative_date", r",?\s*\bby\s+" + _RELATIVE_DATE + r"\b"),
    _rule("relative_date", r",?\s*\b" + _RELATIVE_DATE + r"\b"),
    _rule(
        "time_of_day",
        r",?\s*\b(?:(?:in\s+the|this|at|by|tonight\s+at)\s+)?" + _TIME_OF_DAY + r"\b",
    ),
    _rule(
        "clock_time",
        r",?\s*\b(?:at|by|around)\s+\d{1,2}(?::\d{2})?\s*(?:am|pm|a\.m\.|p\.m\.)?(?!\w)",
    ),
    _rule("dangling_punctuation", r"^[\s,.;:!-]+|[\s,.;:!?-]+$"),
    _rule("collapse_whitespace", r"\s{2,}", " "),
)


def strip_title_phrases(text: str) -> str:
    """Apply every rule in :data:`TITLE_RULES` in order and trim the result."""
    for rule in TITLE_RULES:
        text = rule.apply(text)
    return text.strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return text[:1].upper() + text[1:]


def normalize_title(candidate: str, original: str) -> str:
    """Clean *candidate* into a task title.

    Args:
        candidate: Text to clean, e.g. the model's title or the transcript.
        original: Text to fall back on when cleaning leaves nothing.

    Returns:
        A non-empty title whose first character is upper-case.  When
        both the cleaned candidate and *original* are blank, returns
        :data:`UNTITLED`.
    """
    cleaned = strip_title_phrases(candidate or "")
    if cleaned:
        return capitalize_first(cleaned)

    fallback = (original or "").strip()
    if fallback:
        return capitalize_first(fallback)
    return UNTITLED
