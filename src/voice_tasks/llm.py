"""Hugging Face text-generation client and response parsing.

:class:`HuggingFaceClient` sends one prompt to a hosted model with
:mod:`httpx` and returns the generated text.  Every failure on the way
(timeout, connection error, non-2xx status, a body that is not JSON, an
envelope of unknown shape) is raised as
:class:`~voice_tasks.exceptions.InferenceError`; no retries are made.

:func:`parse_task_payload` turns generated text into a
:class:`~voice_tasks.models.payload.ModelTaskPayload`, raising
:class:`~voice_tasks.exceptions.MalformedResponseError` when it cannot.
"""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Protocol

import httpx
from pydantic import ValidationError

from voice_tasks.config import InferenceConfig
from voice_tasks.exceptions import InferenceError, MalformedResponseError
from voice_tasks.models.envelope import UnrecognizedEnvelope, classify_envelope
from voice_tasks.models.payload import ModelTaskPayload

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


class TextGenerator(Protocol):
    """Anything that can turn a prompt into generated text.

    Implementations raise :class:`InferenceError` when no text can be
    produced.
    """

    def generate(self, prompt: str) -> str: ...


class HuggingFaceClient:
    """Client for the Hugging Face Inference API text-generation task.

    Args:
        config: Endpoint, token, timeout and sampling settings.
        transport: Optional :mod:`httpx` transport, used by tests to
            substitute a :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        config: InferenceConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> InferenceConfig:
        return self._config

    def build_request_body(self, prompt: str) -> dict:
        """Return the JSON body for one generation request."""
        return {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self._config.max_new_tokens,
                "temperature": self._config.temperature,
                "top_p": self._config.top_p,
                "return_full_text": False,
            },
        }

    def generate(self, prompt: str) -> str:
        """Send *prompt* to the model and return the generated text.

        A fresh :class:`httpx.Client` is opened for the call and closed
        before returning, so nothing is held between calls.

        Raises:
            InferenceError: On any transport, status, decoding or envelope
                failure.
        """
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

        deadline = time.monotonic() + self._config.timeout_seconds

        try:
            with httpx.Client(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                with client.stream(
                    "POST",
                    self._config.model_url,
                    json=self.build_request_body(prompt),
                    headers=headers,
                ) as response:
                    response.raise_for_status()
                    data = json.loads(_read_before(response, deadline))
        except httpx.TimeoutException as exc:
            raise InferenceError(
                f"Inference request timed out after {self._config.timeout_seconds}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise InferenceError(
                f"Inference service returned HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise InferenceError(f"Inference request failed: {exc}") from exc
        except ValueError as exc:
            raise InferenceError(f"Inference response is not JSON: {exc}") from exc

        envelope = classify_envelope(data)
        if isinstance(envelope, UnrecognizedEnvelope):
            raise InferenceError(f"Unrecognized response envelope: {envelope.reason}")

        logger.debug("Generated text (%s envelope):\n%s", envelope.kind, envelope.text)
        return envelope.text


def _read_before(response: httpx.Response, deadline: float) -> bytes:
    """Read the streamed body, failing once *deadline* (monotonic) passes.

    httpx timeouts bound each network phase separately; this caps the
    whole exchange.
    """
    body = bytearray()
    for chunk in response.iter_bytes():
        body.extend(chunk)
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout(
                "Response not complete before the request deadline",
                request=response.request,
            )
    return bytes(body)


def clean_response_text(text: str) -> str:
    """Strip code fences and anything outside the outermost braces.

    Returns an empty string when the text contains no ``{ ... }`` span.
    """
    stripped = _CODE_FENCE_RE.sub("", text)
    start = stripped.find("{")
    end = stripped.rfind("}")
    if start == -1 or end < start:
        return ""
    return stripped[start : end + 1].strip()


def parse_task_payload(raw_text: str) -> ModelTaskPayload:
    """Parse generated text into a :class:`ModelTaskPayload`.

    Args:
        raw_text: Text generated by the model.

    Returns:
        The parsed payload.  Its ``title`` is guaranteed non-empty.

    Raises:
        MalformedResponseError: If no JSON object can be decoded, the JSON
            is not an object, or the object has no usable ``title``.
    """
    cleaned = clean_response_text(raw_text or "")
    if not cleaned:
        raise MalformedResponseError(
            "No JSON object in model response", raw_response=raw_text or ""
        )

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            f"Invalid JSON: {exc}", raw_response=raw_text
        ) from exc

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}",
            raw_response=raw_text,
        )

    try:
        payload = ModelTaskPayload.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Schema validation failed: {exc}", raw_response=raw_text
        ) from exc

    if payload.title is None:
        raise MalformedResponseError(
            "Model response has no title", raw_response=raw_text
        )

    return payload
