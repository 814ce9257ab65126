"""Unit tests for the model-backed extractor.

The text generator is a stub; these tests cover prompt construction,
field repair, and the malformed-response path.
"""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from voice_tasks.exceptions import InferenceError
from voice_tasks.extractor import model_extract
from voice_tasks.fallback import fallback_extract

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_NOW = datetime(2024, 1, 15, 10, 30)
_TRANSCRIPT = "Add a task to call mom tomorrow evening, it's urgent"


class _StubGenerator:
    """Returns canned text (or raises) and records the prompts it saw."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._error is not None:
            raise self._error
        return self._text


def _task_json(**overrides: object) -> str:
    data: dict[str, object] = {
        "title": "Call mom",
        "description": None,
        "priority": "Urgent",
        "dueDate": "2024-01-16",
        "dueTime": "18:00",
        "status": "To Do",
        "confidence": "high",
    }
    data.update(overrides)
    return json.dumps(data)


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestModelExtractSuccess:
    """A well-formed model answer is validated field by field."""

    def test_well_formed_answer(self) -> None:
        raw = _task_json()
        result = model_extract(_TRANSCRIPT, _NOW, _StubGenerator(raw))

        assert result.transcript == _TRANSCRIPT
        assert result.parsed.title == "Call mom"
        assert result.parsed.priority == "Urgent"
        assert result.parsed.due_date == date(2024, 1, 16)
        assert result.parsed.due_time == "18:00"
        assert result.parsed.status == "To Do"
        assert result.confidence == "high"
        assert result.raw_response == raw

    def test_prompt_carries_transcript_and_now(self) -> None:
        generator = _StubGenerator(_task_json())

        model_extract(_TRANSCRIPT, _NOW, generator)

        assert len(generator.prompts) == 1
        prompt = generator.prompts[0]
        assert "call mom tomorrow evening" in prompt
        assert "2024-01-15" in prompt
        assert "10:30" in prompt

    def test_model_title_is_cleaned(self) -> None:
        raw = _task_json(title="create a task to buy milk")

        result = model_extract("buy milk", _NOW, _StubGenerator(raw))

        assert result.parsed.title == "Buy milk"

    def test_priority_label_is_renormalized(self) -> None:
        raw = _task_json(priority="very IMPORTANT")

        result = model_extract("do it", _NOW, _StubGenerator(raw))

        assert result.parsed.priority == "High"

    def test_unknown_priority_is_medium(self) -> None:
        result = model_extract("do it", _NOW, _StubGenerator(_task_json(priority="p2")))

        assert result.parsed.priority == "Medium"

    def test_explicit_model_date(self) -> None:
        raw = _task_json(dueDate="2024-03-03")

        result = model_extract("Dentist appointment on March 3rd", _NOW, _StubGenerator(raw))

        assert result.parsed.due_date == date(2024, 3, 3)

    def test_unparseable_model_date_is_dropped(self) -> None:
        raw = _task_json(dueDate="someday")

        result = model_extract("water the plants", _NOW, _StubGenerator(raw))

        assert result.parsed.due_date is None
        assert result.parsed.title == "Call mom"

    def test_missing_model_date_uses_transcript(self) -> None:
        raw = _task_json(dueDate=None)

        result = model_extract("pay rent in 3 days", _NOW, _StubGenerator(raw))

        assert result.parsed.due_date == date(2024, 1, 18)


class TestTimeRepair:
    """Due time: model clock, then model phrase, then transcript."""

    def test_unpadded_clock(self) -> None:
        result = model_extract("x", _NOW, _StubGenerator(_task_json(dueTime="9:05")))

        assert result.parsed.due_time == "09:05"

    def test_clock_with_seconds(self) -> None:
        result = model_extract("x", _NOW, _StubGenerator(_task_json(dueTime="18:00:00")))

        assert result.parsed.due_time == "18:00"

    def test_model_phrase(self) -> None:
        result = model_extract("x", _NOW, _StubGenerator(_task_json(dueTime="3pm")))

        assert result.parsed.due_time == "15:00"

    def test_missing_model_time_uses_transcript(self) -> None:
        raw = _task_json(dueTime=None)

        result = model_extract("call at 4pm", _NOW, _StubGenerator(raw))

        assert result.parsed.due_time == "16:00"

    def test_garbage_model_time_uses_transcript(self) -> None:
        raw = _task_json(dueTime="whenever")

        result = model_extract("walk the dog in the morning", _NOW, _StubGenerator(raw))

        assert result.parsed.due_time == "09:00"

    def test_tonight_in_transcript(self) -> None:
        raw = _task_json(dueTime=None)

        result = model_extract("call mom tonight", _NOW, _StubGenerator(raw))

        assert result.parsed.due_time == "20:00"

    def test_invalid_clock_is_dropped(self) -> None:
        raw = _task_json(dueTime="25:99")

        result = model_extract("no time here", _NOW, _StubGenerator(raw))

        assert result.parsed.due_time is None


class TestFieldsNotTakenFromModel:
    """Status and description are fixed; confidence defaults to medium."""

    def test_status_forced_to_do(self) -> None:
        result = model_extract("x", _NOW, _StubGenerator(_task_json(status="Completed")))

        assert result.parsed.status == "To Do"

    def test_description_dropped(self) -> None:
        raw = _task_json(description="Ask about the weekend")

        result = model_extract("x", _NOW, _StubGenerator(raw))

        assert result.parsed.description is None

    def test_missing_confidence_is_medium(self) -> None:
        raw = _task_json(confidence=None)

        assert model_extract("x", _NOW, _StubGenerator(raw)).confidence == "medium"

    def test_unknown_confidence_is_medium(self) -> None:
        raw = _task_json(confidence="very sure")

        assert model_extract("x", _NOW, _StubGenerator(raw)).confidence == "medium"

    def test_confidence_is_case_insensitive(self) -> None:
        raw = _task_json(confidence="LOW")

        assert model_extract("x", _NOW, _StubGenerator(raw)).confidence == "low"


# ---------------------------------------------------------------------------
# Malformed answers and transport failures
# ---------------------------------------------------------------------------


class TestMalformedAnswer:
    """Non-JSON answers are replaced by the rule-based result."""

    @pytest.mark.parametrize(
        "raw",
        [
            "Sure! The task is to call your mom.",
            '{"title": "Call mom",, }',
            '{"priority": "Urgent"}',
            "",
        ],
    )
    def test_uses_fallback_fields(self, raw: str) -> None:
        result = model_extract(_TRANSCRIPT, _NOW, _StubGenerator(raw))

        assert result.parsed == fallback_extract(_TRANSCRIPT, today=_NOW.date())
        assert result.confidence == "low"
        assert result.raw_response == raw

    def test_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="voice_tasks.extractor"):
            model_extract(_TRANSCRIPT, _NOW, _StubGenerator("not json"))

        assert "rule-based parser" in caplog.text


class TestInferenceFailure:
    """Call failures are left for the orchestrator."""

    def test_inference_error_propagates(self) -> None:
        generator = _StubGenerator(error=InferenceError("down"))

        with pytest.raises(InferenceError):
            model_extract(_TRANSCRIPT, _NOW, generator)
