"""Parse orchestrator: the public entry point for voice commands.

:class:`VoiceCommandParser` tries the model-backed extractor and falls back
to the rule-based parser when the call fails for any reason.  It never
raises, so a caller can always turn a transcript into a task.  Storing the
task and the audit record is left to the caller (see
:mod:`voice_tasks.records`).
"""

from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from voice_tasks.config import Settings
from voice_tasks.exceptions import InferenceError
from voice_tasks.extractor import model_extract
from voice_tasks.fallback import fallback_extract
from voice_tasks.llm import HuggingFaceClient, TextGenerator
from voice_tasks.models.task import VoiceParseResult

logger = logging.getLogger(__name__)


class VoiceCommandParser:
    """Turns transcripts into :class:`VoiceParseResult` objects.

    Instances hold only their configuration and are safe to share between
    threads; every :meth:`parse` call is independent.

    Args:
        client: Text generator for the model-backed path, or ``None`` to
            use only the rule-based parser.
        timezone: IANA timezone used for "now" when the caller does not
            pass one.  ``None`` uses the host's local time.
    """

    def __init__(
        self,
        client: TextGenerator | None = None,
        timezone: str | None = None,
    ) -> None:
        self._client = client
        self._tz = ZoneInfo(timezone) if timezone else None

    @classmethod
    def from_settings(cls, settings: Settings) -> VoiceCommandParser:
        """Build a parser backed by :class:`HuggingFaceClient`."""
        return cls(
            client=HuggingFaceClient(settings.inference),
            timezone=settings.timezone,
        )

    def now(self) -> datetime:
        return datetime.now(self._tz) if self._tz else datetime.now()

    def parse(self, transcript: str, now: datetime | None = None) -> VoiceParseResult:
        """Parse one voice command.

        Args:
            transcript: Non-empty speech-to-text output.
            now: The moment relative dates are resolved against.
                Defaults to :meth:`now`.

        Returns:
            A complete :class:`VoiceParseResult`.  When the model could
            not be reached the result comes from the rule-based parser,
            with ``"low"`` confidence and no raw response.
        """
        if now is None:
            now = self.now()

        if self._client is None:
            logger.info("No inference client configured, using rule-based parser")
            return self._fallback(transcript, now)

        try:
            result = model_extract(transcript, now, self._client)
        except InferenceError as exc:
            logger.warning("Inference call failed, using rule-based parser: %s", exc)
            return self._fallback(transcript, now)
        except Exception:
            logger.exception("Unexpected error in model extraction, using rule-based parser")
            return self._fallback(transcript, now)

        logger.info(
            "Parsed voice command: title=%r priority=%s due=%s %s | confidence=%s",
            result.parsed.title,
            result.parsed.priority,
            result.parsed.due_date,
            result.parsed.due_time,
            result.confidence,
        )
        return result

    @staticmethod
    def _fallback(transcript: str, now: datetime) -> VoiceParseResult:
        return VoiceParseResult(
            transcript=transcript,
            parsed=fallback_extract(transcript, today=now.date()),
            confidence="low",
        )


def parse(
    transcript: str,
    *,
    client: TextGenerator | None = None,
    now: datetime | None = None,
) -> VoiceParseResult:
    """Parse one voice command with a throwaway :class:`VoiceCommandParser`.

    Args:
        transcript: Non-empty speech-to-text output.
        client: Text generator for the model path; ``None`` for the
            rule-based parser only.
        now: The moment relative dates are resolved against.

    Returns:
        A complete :class:`VoiceParseResult`.  Never raises.
    """
    return VoiceCommandParser(client=client).parse(transcript, now=now)
