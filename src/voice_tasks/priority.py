"""Keyword-based priority classification."""

from __future__ import annotations

from voice_tasks.models.task import Priority

# Checked in order; the first level with a keyword present wins, so
# "low but urgent" is Urgent.
PRIORITY_KEYWORDS: tuple[tuple[Priority, tuple[str, ...]], ...] = (
    ("Urgent", ("urgent", "critical")),
    ("High", ("high", "important")),
    ("Low", ("low",)),
)


def classify_priority(text: str | None) -> Priority:
    """Map free text to ``Low``, ``Medium``, ``High`` or ``Urgent``.

    Matching is a case-insensitive substring test, so a model answer of
    ``"URGENT"`` and a transcript saying "this is urgent" both map to
    ``Urgent``.  Text with no keyword (or ``None``) is ``Medium``.
    """
    lowered = (text or "").lower()
    for level, keywords in PRIORITY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return level
    return "Medium"
