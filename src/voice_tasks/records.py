"""Payloads handed to the task store and the voice-command audit log.

The parser does not persist anything.  Callers take a
:class:`~voice_tasks.models.task.VoiceParseResult` and use these helpers
to build the task-creation request and the audit row, then send them to
their own storage.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from voice_tasks.models.task import ParsedTaskData, Priority, VoiceParseResult


class TaskCreateRequest(BaseModel):
    """Body of a task-creation call for a voice-created task."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str | None = None
    priority: Priority = "Medium"
    status: Literal["To Do"] = "To Do"
    due_date: date | None = Field(default=None, alias="dueDate")
    due_time: str | None = Field(default=None, alias="dueTime")
    created_via: Literal["voice"] = Field(default="voice", alias="createdVia")


class VoiceCommandRecord(BaseModel):
    """One audit-log row per parse call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transcript: str
    parsed_data: ParsedTaskData = Field(alias="parsedData")
    success: bool = True


def build_task_request(result: VoiceParseResult) -> TaskCreateRequest:
    """Build the task-creation request for a parse result."""
    parsed = result.parsed
    return TaskCreateRequest(
        title=parsed.title,
        description=parsed.description,
        priority=parsed.priority,
        due_date=parsed.due_date,
        due_time=parsed.due_time,
    )


def build_audit_record(result: VoiceParseResult, success: bool = True) -> VoiceCommandRecord:
    """Build the audit row for a parse result.

    Args:
        result: The parse result to record.
        success: Whether the caller went on to create the task.
    """
    return VoiceCommandRecord(
        transcript=result.transcript,
        parsed_data=result.parsed,
        success=success,
    )
