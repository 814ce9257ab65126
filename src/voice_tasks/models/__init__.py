"""Data models for voice-tasks."""

from __future__ import annotations

from voice_tasks.models.envelope import (
    ListEnvelope,
    ObjectEnvelope,
    ResponseEnvelope,
    UnrecognizedEnvelope,
    classify_envelope,
)
from voice_tasks.models.task import (
    Confidence,
    ParsedTaskData,
    Priority,
    VoiceParseResult,
)

__all__ = [
    "Confidence",
    "ListEnvelope",
    "ObjectEnvelope",
    "ParsedTaskData",
    "Priority",
    "ResponseEnvelope",
    "UnrecognizedEnvelope",
    "VoiceParseResult",
    "classify_envelope",
]
