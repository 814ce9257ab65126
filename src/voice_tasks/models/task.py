"""Pydantic models for parsed voice tasks.

- :class:`ParsedTaskData` -- the structured task guessed from a transcript.
- :class:`VoiceParseResult` -- that task plus the transcript, a confidence
  label, and (when the model answered) its raw text.

Field names are snake_case in Python and camelCase on the wire
(``dueDate``, ``dueTime``, ``rawResponse``), matching the task API.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Priority = Literal["Low", "Medium", "High", "Urgent"]
Confidence = Literal["high", "medium", "low"]

CONFIDENCES: tuple[str, ...] = ("high", "medium", "low")

_CLOCK_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ParsedTaskData(BaseModel):
    """A task extracted from a voice command.

    Attributes:
        title: Cleaned, capitalized task title.  Never blank.
        description: Reserved; this parser always leaves it ``None``.
        priority: One of ``Low``, ``Medium``, ``High``, ``Urgent``.
        due_date: Calendar date the task is due, or ``None``.
        due_time: 24-hour ``HH:MM`` clock time, or ``None``.
        status: Always ``"To Do"`` for voice-created tasks.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str | None = None
    priority: Priority = "Medium"
    due_date: date | None = Field(default=None, alias="dueDate")
    due_time: str | None = Field(default=None, alias="dueTime")
    status: Literal["To Do"] = "To Do"

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("due_time")
    @classmethod
    def _due_time_is_clock(cls, value: str | None) -> str | None:
        if value is not None and not _CLOCK_RE.match(value):
            raise ValueError("due_time must be HH:MM (24-hour)")
        return value


class VoiceParseResult(BaseModel):
    """Outcome of one parse call.

    Attributes:
        transcript: The input transcript, verbatim.
        parsed: The structured task.
        confidence: ``"low"`` whenever the rule-based parser produced
            :attr:`parsed`; otherwise the model's own label (default
            ``"medium"``).
        raw_response: Text generated by the model, kept for diagnostics.
            ``None`` when the model was never reached.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transcript: str
    parsed: ParsedTaskData
    confidence: Confidence
    raw_response: str | None = Field(default=None, alias="rawResponse")
