"""Response envelopes returned by the Hugging Face text-generation API.

The endpoint answers in one of two shapes:

- a list whose first element carries ``generated_text``
  (:class:`ListEnvelope`), or
- an object with a top-level ``generated_text`` (:class:`ObjectEnvelope`).

Anything else becomes an :class:`UnrecognizedEnvelope`, which the client
treats as a failed call.  :func:`classify_envelope` is the only place that
inspects the decoded body.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, ValidationError


class GeneratedItem(BaseModel):
    """One candidate in a list-shaped response."""

    generated_text: str


class ListEnvelope(BaseModel):
    """``[{"generated_text": "..."}, ...]``; only the first item is used."""

    kind: Literal["list"] = "list"
    first: GeneratedItem

    @property
    def text(self) -> str:
        return self.first.generated_text


class ObjectEnvelope(BaseModel):
    """``{"generated_text": "..."}``."""

    kind: Literal["object"] = "object"
    generated_text: str

    @property
    def text(self) -> str:
        return self.generated_text


class UnrecognizedEnvelope(BaseModel):
    """A decoded body that matches neither known shape.

    Attributes:
        reason: Why classification failed.
        payload: The decoded body, for logging.
    """

    kind: Literal["unrecognized"] = "unrecognized"
    reason: str
    payload: Any = None


ResponseEnvelope = Annotated[
    Union[ListEnvelope, ObjectEnvelope, UnrecognizedEnvelope],
    Field(discriminator="kind"),
]


def classify_envelope(data: Any) -> ListEnvelope | ObjectEnvelope | UnrecognizedEnvelope:
    """Sort a decoded response body into one of the envelope variants.

    Args:
        data: The JSON-decoded response body.

    Returns:
        A :class:`ListEnvelope`, :class:`ObjectEnvelope`, or
        :class:`UnrecognizedEnvelope`.  Never raises.
    """
    if isinstance(data, list):
        if not data:
            return UnrecognizedEnvelope(reason="empty list", payload=data)
        try:
            return ListEnvelope(first=data[0])
        except ValidationError as exc:
            return UnrecognizedEnvelope(
                reason=f"list item lacks generated_text: {exc.error_count()} error(s)",
                payload=data,
            )

    if isinstance(data, dict):
        if "generated_text" not in data:
            return UnrecognizedEnvelope(
                reason=f"object keys {sorted(data)} lack generated_text",
                payload=data,
            )
        try:
            return ObjectEnvelope(generated_text=data["generated_text"])
        except ValidationError as exc:
            return UnrecognizedEnvelope(
                reason=f"generated_text is not a string: {exc.error_count()} error(s)",
                payload=data,
            )

    return UnrecognizedEnvelope(
        reason=f"unexpected body type {type(data).__name__}", payload=data
    )
