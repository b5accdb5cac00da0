"""Speech-to-text wrapper around the transcription client."""

import logging
from dataclasses import dataclass

from food_logger.adapters.openai_transcription_client import TranscriptionClient
from food_logger.domain.errors import TranscriptionFailure
from food_logger.domain.nutrition import TranscriptionResult

_logger = logging.getLogger(__name__)


@dataclass
class TranscriptionService:
    """Turn recorded audio into plain text."""

    client: TranscriptionClient
    model: str = "whisper-1"
    language: str | None = "en"

    async def transcribe(self, audio: bytes, filename: str) -> TranscriptionResult:
        """Transcribe audio bytes; the filename hints the format to the service."""
        if not audio:
            raise TranscriptionFailure("Audio file is empty")
        try:
            result = await self.client.transcribe(
                model=self.model,
                audio=audio,
                filename=filename,
                language=self.language,
            )
        except Exception as exc:
            _logger.warning("Transcription failed for %s: %s", filename, exc)
            raise TranscriptionFailure("Failed to transcribe audio file") from exc
        _logger.info(
            "Transcribed %s (%s bytes, language=%s)",
            filename,
            len(audio),
            result.language,
        )
        return result
