"""Model-backed task extraction with field-by-field repair.

:func:`model_extract` asks the language model for a task object, then
runs every field it returns back through the same rules the fallback
parser uses.  A reply that is not a usable JSON object is replaced by the
rule-based result; an individual field that makes no sense is dropped
without discarding the rest.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from voice_tasks.dates import resolve_date, resolve_time
from voice_tasks.exceptions import MalformedResponseError
from voice_tasks.fallback import fallback_extract
from voice_tasks.llm import TextGenerator, parse_task_payload
from voice_tasks.models.payload import ModelTaskPayload
from voice_tasks.models.task import CONFIDENCES, Confidence, ParsedTaskData, VoiceParseResult
from voice_tasks.priority import classify_priority
from voice_tasks.prompts import build_prompt
from voice_tasks.titles import normalize_title

logger = logging.getLogger(__name__)

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def model_extract(
    transcript: str,
    now: datetime,
    client: TextGenerator,
) -> VoiceParseResult:
    """Extract a task from *transcript* using the language model.

    Args:
        transcript: The raw voice transcript.
        now: Current date and time at the caller; embedded in the prompt
            and used to anchor relative dates during repair.
        client: The text generator to call once.

    Returns:
        A :class:`VoiceParseResult` carrying the model's raw text.  When
        that text is not a usable task object the fields come from
        :func:`~voice_tasks.fallback.fallback_extract` and the confidence
        is ``"low"``.

    Raises:
        InferenceError: If the call itself fails.  The orchestrator
            handles it.
    """
    prompt = build_prompt(transcript, now)
    logger.debug("Prompt sent to model:\n%s", prompt)

    raw_text = client.generate(prompt)

    try:
        payload = parse_task_payload(raw_text)
    except MalformedResponseError as exc:
        logger.warning(
            "Model response unusable, using rule-based parser: %s | raw=%r",
            exc,
            exc.raw_response,
        )
        return VoiceParseResult(
            transcript=transcript,
            parsed=fallback_extract(transcript, today=now.date()),
            confidence="low",
            raw_response=raw_text,
        )

    return VoiceParseResult(
        transcript=transcript,
        parsed=repair_payload(payload, transcript, now),
        confidence=_confidence(payload.confidence),
        raw_response=raw_text,
    )


def repair_payload(
    payload: ModelTaskPayload,
    transcript: str,
    now: datetime,
) -> ParsedTaskData:
    """Validate each field of the model's payload independently.

    - title: cleaned like a transcript.
    - priority: re-classified from whatever label the model gave.
    - due date: the model's date string, with the transcript as a
      secondary hint for relative phrases.
    - due time: the model's value if it is a clock time, else anything
      :func:`resolve_time` finds in it, else in the transcript.
    - description and status: not taken from the model.
    """
    title = payload.title or transcript
    return ParsedTaskData(
        title=normalize_title(title, title),
        priority=classify_priority(payload.priority),
        due_date=resolve_date(payload.due_date or "", transcript, today=now.date()),
        due_time=_repair_time(payload.due_time, transcript),
    )


def _repair_time(model_time: str | None, transcript: str) -> str | None:
    if model_time:
        clock = _normalize_clock(model_time) or resolve_time(model_time)
        if clock is not None:
            return clock
        logger.debug("Discarding unparseable model dueTime %r", model_time)
    return resolve_time(transcript)


def _normalize_clock(value: str) -> str | None:
    """Zero-pad ``H:MM`` (or ``HH:MM:SS``) to ``HH:MM``; ``None`` if invalid."""
    match = _CLOCK_RE.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def _confidence(value: str | None) -> Confidence:
    label = (value or "").strip().lower()
    if label in CONFIDENCES:
        return label  # type: ignore[return-value]
    return "medium"
