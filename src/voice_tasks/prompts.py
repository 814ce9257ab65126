"""Prompt builder for the task-extraction model call.

The target model (Mistral-7B-Instruct by default) is a plain text
generator, so everything it needs goes into one instruction block wrapped
in ``[INST]`` tags: the transcript, the current date and time, the
time-of-day vocabulary, and a strict JSON output directive.
"""

from __future__ import annotations

import json
from datetime import datetime

from voice_tasks.dates import TIME_OF_DAY

RESPONSE_KEYS: tuple[str, ...] = (
    "title",
    "description",
    "priority",
    "dueDate",
    "dueTime",
    "status",
    "confidence",
)


def format_time_vocabulary() -> str:
    """Render :data:`~voice_tasks.dates.TIME_OF_DAY` as a bullet list."""
    return "\n".join(f"- {word} = {clock}" for word, clock in TIME_OF_DAY)


def build_prompt(transcript: str, now: datetime) -> str:
    """Build the instruction prompt for one voice command.

    Args:
        transcript: The raw voice transcript.  It is embedded as a JSON
            string literal so quotes inside it cannot break the prompt.
        now: The caller's current date and time, used by the model to
            resolve "tomorrow", "next Monday" and the like.

    Returns:
        The complete prompt string.
    """
    current_date = now.strftime("%Y-%m-%d")
    current_time = now.strftime("%H:%M")

    return f"""\
<s>[INST] You are a task parsing assistant. Parse the following voice command and extract task information.

Voice Command: {json.dumps(transcript, ensure_ascii=False)}

Current date: {current_date}
Current time: {current_time}

Extract:
1. Title: Clean task description (capitalize first letter, remove "create", "add", "task to" prefixes)
2. Due Date: Parse dates (tomorrow, next Monday, in 3 days, January 15, etc.) relative to the current date
3. Due Time: Extract time from time-of-day words or specific times such as "3pm"
4. Priority: urgent/critical=Urgent, high/important=High, low=Low, default=Medium
5. Status: Always "To Do"

Time mappings:
{format_time_vocabulary()}

Return ONLY one valid JSON object (no markdown, no explanation) with exactly these keys:
{{
  "title": "Clean task title with proper capitalization",
  "description": null,
  "priority": "Low|Medium|High|Urgent",
  "dueDate": "YYYY-MM-DD or null",
  "dueTime": "HH:MM or null",
  "status": "To Do",
  "confidence": "high|medium|low"
}}
[/INST]"""
