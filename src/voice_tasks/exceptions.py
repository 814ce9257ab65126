"""Custom exceptions for the voice-task parsing pipeline.

Neither exception ever reaches the caller of
:func:`~voice_tasks.pipeline.parse`; both mark the points where the
rule-based fallback takes over.
"""

from __future__ import annotations


class InferenceError(Exception):
    """Raised when the inference service call cannot produce text.

    This covers timeouts, connection errors, non-2xx responses, bodies
    that are not JSON, and response envelopes of an unrecognised shape.
    The orchestrator catches it and answers with the rule-based parser.

    Attributes:
        status_code: HTTP status of the failed response, or ``None`` when
            no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(Exception):
    """Raised when the generated text is not a usable JSON task object.

    The model extractor catches this and repairs the result with the
    rule-based parser, keeping the raw text for diagnostics.

    Attributes:
        raw_response: The generated text that failed to parse.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response
