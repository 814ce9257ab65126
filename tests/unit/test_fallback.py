"""Unit tests for the rule-based extractor."""

from __future__ import annotations

from datetime import date

import pytest

from voice_tasks.fallback import fallback_extract

_TODAY = date(2024, 1, 15)


class TestFallbackExtract:
    """Keyword and pattern extraction straight from the transcript."""

    def test_end_to_end_example(self) -> None:
        task = fallback_extract(
            "Add a task to call mom tomorrow evening, it's urgent", today=_TODAY
        )

        assert task.title == "Call mom"
        assert task.priority == "Urgent"
        assert task.due_date == date(2024, 1, 16)
        assert task.due_time == "18:00"
        assert task.status == "To Do"
        assert task.description is None

    def test_in_days_with_clock_time(self) -> None:
        task = fallback_extract("Remind me to pay rent in 3 days at 9am", today=_TODAY)

        assert task.title == "Remind me to pay rent"
        assert task.priority == "Medium"
        assert task.due_date == date(2024, 1, 18)
        assert task.due_time == "09:00"

    def test_no_date_or_time(self) -> None:
        task = fallback_extract("create a task to water the plants", today=_TODAY)

        assert task.title == "Water the plants"
        assert task.due_date is None
        assert task.due_time is None

    def test_tonight(self) -> None:
        task = fallback_extract("remind me to call mom tonight", today=_TODAY)

        assert task.title == "Remind me to call mom"
        assert task.due_time == "20:00"
        assert task.due_date is None

    def test_next_without_weekday_stays_in_title(self) -> None:
        task = fallback_extract("Plan next steps for launch", today=_TODAY)

        assert task.title == "Plan next steps for launch"
        assert task.due_date is None

    def test_low_priority(self) -> None:
        task = fallback_extract("clean the garage, low priority", today=_TODAY)

        assert task.title == "Clean the garage"
        assert task.priority == "Low"

    def test_is_deterministic(self) -> None:
        transcript = "new task to submit report by next friday, important"

        assert fallback_extract(transcript, today=_TODAY) == fallback_extract(
            transcript, today=_TODAY
        )

    def test_only_date_words_keeps_transcript_as_title(self) -> None:
        task = fallback_extract("tomorrow", today=_TODAY)

        assert task.title == "Tomorrow"
        assert task.due_date == date(2024, 1, 16)

    @pytest.mark.parametrize(
        "transcript",
        ["x", "!!!", "\U0001f642 ¿?", "create a task to", "in 99999999999 days", "a" * 500],
    )
    def test_total_for_odd_input(self, transcript: str) -> None:
        task = fallback_extract(transcript, today=_TODAY)

        assert task.title.strip()
        assert task.status == "To Do"
