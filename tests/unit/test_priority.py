"""Unit tests for the keyword priority classifier."""

from __future__ import annotations

import pytest

from voice_tasks.priority import classify_priority


class TestClassifyPriority:
    """First match wins in the order Urgent > High > Low > Medium."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("this is urgent", "Urgent"),
            ("critical bug in prod", "Urgent"),
            ("important meeting", "High"),
            ("HIGH", "High"),
            ("low priority chore", "Low"),
            ("buy milk", "Medium"),
        ],
    )
    def test_keywords(self, text: str, expected: str) -> None:
        assert classify_priority(text) == expected

    def test_low_but_urgent_is_urgent(self) -> None:
        assert classify_priority("low but urgent task") == "Urgent"

    def test_high_beats_low(self) -> None:
        assert classify_priority("high and low") == "High"

    def test_empty_is_medium(self) -> None:
        assert classify_priority("") == "Medium"

    def test_none_is_medium(self) -> None:
        assert classify_priority(None) == "Medium"

    def test_canonical_labels_round_trip(self) -> None:
        for label in ("Low", "Medium", "High", "Urgent"):
            assert classify_priority(label) == label
