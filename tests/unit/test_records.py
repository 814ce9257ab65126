"""Unit tests for task-store and audit payload builders."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from voice_tasks.models.task import ParsedTaskData, VoiceParseResult
from voice_tasks.records import TaskCreateRequest, build_audit_record, build_task_request


def _result() -> VoiceParseResult:
    return VoiceParseResult(
        transcript="Add a task to call mom tomorrow evening, it's urgent",
        parsed=ParsedTaskData(
            title="Call mom",
            priority="Urgent",
            due_date=date(2024, 1, 16),
            due_time="18:00",
        ),
        confidence="low",
    )


class TestBuildTaskRequest:
    """Task-creation request."""

    def test_fields(self) -> None:
        request = build_task_request(_result())

        assert request.model_dump(by_alias=True, mode="json") == {
            "title": "Call mom",
            "description": None,
            "priority": "Urgent",
            "status": "To Do",
            "dueDate": "2024-01-16",
            "dueTime": "18:00",
            "createdVia": "voice",
        }

    def test_status_is_always_to_do(self) -> None:
        with pytest.raises(ValidationError):
            TaskCreateRequest(title="Call mom", status="In Progress")


class TestBuildAuditRecord:
    """Audit-log row."""

    def test_fields(self) -> None:
        result = _result()

        record = build_audit_record(result)

        assert record.transcript == result.transcript
        assert record.parsed_data == result.parsed
        assert record.success is True

    def test_serialized_keys(self) -> None:
        data = build_audit_record(_result(), success=False).model_dump(by_alias=True, mode="json")

        assert set(data) == {"transcript", "parsedData", "success"}
        assert data["parsedData"]["dueTime"] == "18:00"
        assert data["success"] is False
