"""Configuration loading for voice-tasks.

Reads settings from environment variables (with .env support via python-dotenv)
and validates that all required values are present.  Nothing here runs at
import time: callers build a :class:`Settings` with :func:`load_settings`
and hand its :class:`InferenceConfig` to the inference client explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

DEFAULT_MODEL_URL = (
    "https://api-inference.huggingface.co/models/mistralai/Mistral-7B-Instruct-v0.2"
)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class InferenceConfig:
    """Connection and sampling settings for the text-generation endpoint.

    Attributes:
        api_key: Hugging Face access token, sent as a bearer token.
        model_url: Full URL of the hosted model endpoint.
        timeout_seconds: Hard request timeout; exceeding it is a failure.
        max_new_tokens: Upper bound on generated tokens.
        temperature: Sampling temperature (kept low for determinism).
        top_p: Nucleus sampling cutoff.
    """

    api_key: str
    model_url: str = DEFAULT_MODEL_URL
    timeout_seconds: float = 30.0
    max_new_tokens: int = 250
    temperature: float = 0.3
    top_p: float = 0.9

    def __repr__(self) -> str:
        return (
            f"InferenceConfig(api_key='***', "
            f"model_url={self.model_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, "
            f"max_new_tokens={self.max_new_tokens!r}, "
            f"temperature={self.temperature!r}, "
            f"top_p={self.top_p!r})"
        )


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        inference: Settings for the inference client.
        log_level: Logging level (default ``"INFO"``).
        timezone: IANA timezone used to stamp "now" for relative dates,
            or ``None`` to use the host's local time.
    """

    inference: InferenceConfig
    log_level: str = "INFO"
    timezone: str | None = None


def _read_number(env_var: str, cast: type, errors: list[str]) -> float | int | None:
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError:
        errors.append(f"{env_var}={raw!r} is not a valid {cast.__name__}")
        return None


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``HUGGINGFACE_API_KEY`` is missing, empty, or
            whitespace-only, or if an optional value cannot be parsed.
            The error message names **all** offending variables.
    """
    load_dotenv()

    api_key = os.environ.get("HUGGINGFACE_API_KEY", "")
    if not api_key.strip():
        raise ConfigError(
            "Missing required environment variables: HUGGINGFACE_API_KEY"
        )

    inference: dict[str, object] = {"api_key": api_key.strip()}
    errors: list[str] = []

    model_url = os.environ.get("HUGGINGFACE_MODEL_URL", "").strip()
    if model_url:
        inference["model_url"] = model_url

    numeric = {
        "INFERENCE_TIMEOUT": ("timeout_seconds", float),
        "INFERENCE_MAX_NEW_TOKENS": ("max_new_tokens", int),
        "INFERENCE_TEMPERATURE": ("temperature", float),
    }
    for env_var, (field_name, cast) in numeric.items():
        value = _read_number(env_var, cast, errors)
        if value is not None:
            inference[field_name] = value

    values: dict[str, object] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            errors.append(f"LOG_LEVEL={log_level!r} is not a logging level")

    timezone = os.environ.get("TIMEZONE", "").strip()
    if timezone:
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"TIMEZONE={timezone!r} is not a known IANA timezone")
        else:
            values["timezone"] = timezone

    if errors:
        raise ConfigError("Invalid configuration: " + "; ".join(errors))

    return Settings(inference=InferenceConfig(**inference), **values)
