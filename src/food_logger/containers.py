"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_logger.adapters.openai_text_client import OpenAITextClient
from food_logger.adapters.openai_transcription_client import (
    OpenAITranscriptionClient,
)
from food_logger.config import Settings
from food_logger.services.brands import BrandMatcher
from food_logger.services.extraction import ExtractionService
from food_logger.services.food_log import FoodLogService
from food_logger.services.insights import InsightService
from food_logger.services.transcription import TranscriptionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    brand_matcher: BrandMatcher
    food_log_service: FoodLogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    text_client = OpenAITextClient.create(
        api_key=resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    transcription_client = OpenAITranscriptionClient.create(
        api_key=resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    brand_matcher = BrandMatcher()
    insight_service = InsightService(
        client=text_client,
        model=resolved_settings.openai_model,
        brand_matcher=brand_matcher,
        temperature=resolved_settings.insight_temperature,
        max_tokens=resolved_settings.insight_max_tokens,
        timeout_seconds=resolved_settings.insight_timeout_seconds,
        max_concurrency=resolved_settings.insight_concurrency,
    )
    extraction_service = ExtractionService(
        client=text_client,
        insight_service=insight_service,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.extraction_temperature,
        max_tokens=resolved_settings.extraction_max_tokens,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    transcription_service = TranscriptionService(
        client=transcription_client,
        model=resolved_settings.transcription_model,
        language=resolved_settings.transcription_language,
    )
    food_log_service = FoodLogService(
        extraction_service=extraction_service,
        transcription_service=transcription_service,
    )

    async def close_resources() -> None:
        await text_client.close()
        await transcription_client.close()

    return AppContainer(
        settings=resolved_settings,
        brand_matcher=brand_matcher,
        food_log_service=food_log_service,
        close_resources=close_resources,
    )
