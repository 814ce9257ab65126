"""Lenient schema for the JSON object the model is asked to produce.

The model is told to return strings or ``null`` for every key, but small
instruction-tuned models drift: numbers for titles, empty strings for
missing values, extra keys.  :class:`ModelTaskPayload` accepts all of that
and reduces each field to ``str | None``; deciding what a value *means* is
left to the extractor.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelTaskPayload(BaseModel):
    """The model's task object, one optional string per key.

    Attributes:
        title: Proposed task title.
        description: Proposed description (not forwarded).
        priority: Free-text priority label.
        due_date: Date string, ideally ``YYYY-MM-DD``.
        due_time: Time string, ideally ``HH:MM``.
        status: Proposed status (ignored; voice tasks start as To Do).
        confidence: The model's self-reported confidence.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    priority: str | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    due_time: str | None = Field(default=None, alias="dueTime")
    status: str | None = None
    confidence: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str | None:
        """Keep non-blank strings, stringify numbers, drop everything else."""
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped or stripped.lower() in {"null", "none", "n/a"}:
                return None
            return stripped
        return None
