"""Rule-based task extraction.

Used whenever the language model is unavailable or answers with something
that is not a task object.  It needs no network and never raises, so a
voice command always yields a task, even if only a rough one.
"""

from __future__ import annotations

import logging
from datetime import date

from voice_tasks.dates import resolve_date, resolve_time
from voice_tasks.models.task import ParsedTaskData
from voice_tasks.priority import classify_priority
from voice_tasks.titles import normalize_title, strip_title_phrases

logger = logging.getLogger(__name__)


def fallback_extract(transcript: str, today: date | None = None) -> ParsedTaskData:
    """Guess a task from the transcript with keyword and pattern rules.

    Args:
        transcript: The raw voice transcript.
        today: Anchor for relative dates.  Defaults to
            :meth:`date.today`.

    Returns:
        A :class:`ParsedTaskData`.  Results from this path are always
        reported with ``"low"`` confidence by the callers.
    """
    task = ParsedTaskData(
        title=normalize_title(strip_title_phrases(transcript), transcript),
        priority=classify_priority(transcript),
        due_date=resolve_date("", transcript, today=today),
        due_time=resolve_time(transcript),
    )
    logger.debug("Rule-based extraction for %r: %s", transcript, task)
    return task
