"""voice-tasks: voice command to task parser.

Turns a speech-to-text transcript into a structured task (title,
priority, due date and time) using a hosted language model, with a
rule-based parser as a fallback that never fails.
"""

from __future__ import annotations

from voice_tasks.dates import resolve_date, resolve_time
from voice_tasks.exceptions import InferenceError, MalformedResponseError
from voice_tasks.extractor import model_extract
from voice_tasks.fallback import fallback_extract
from voice_tasks.models.task import ParsedTaskData, VoiceParseResult
from voice_tasks.pipeline import VoiceCommandParser, parse
from voice_tasks.priority import classify_priority
from voice_tasks.records import build_audit_record, build_task_request
from voice_tasks.titles import normalize_title

__version__ = "0.1.0"

__all__ = [
    "InferenceError",
    "MalformedResponseError",
    "ParsedTaskData",
    "VoiceCommandParser",
    "VoiceParseResult",
    "build_audit_record",
    "build_task_request",
    "classify_priority",
    "fallback_extract",
    "model_extract",
    "normalize_title",
    "parse",
    "resolve_date",
    "resolve_time",
]
