"""Text and voice food logging flows."""

import logging
from dataclasses import dataclass

from food_logger.domain.errors import TranscriptionFailure
from food_logger.domain.nutrition import NutritionLog
from food_logger.services.extraction import ExtractionService
from food_logger.services.transcription import TranscriptionService

_logger = logging.getLogger(__name__)


@dataclass
class FoodLogService:
    """Entry point for logging a meal from typed text or recorded audio."""

    extraction_service: ExtractionService
    transcription_service: TranscriptionService

    async def log_text(self, text: str) -> NutritionLog:
        """Extract a nutrition log from a typed description."""
        return await self.extraction_service.extract(text)

    async def log_voice(self, audio: bytes, filename: str) -> NutritionLog:
        """Transcribe a recording, then extract a nutrition log from it."""
        transcription = await self.transcription_service.transcribe(audio, filename)
        if not transcription.text.strip():
            raise TranscriptionFailure("Transcription returned no text")
        _logger.info("Transcript: %s", transcription.text[:100])
        return await self.extraction_service.extract(transcription.text)
