"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from food_logger.adapters.openai_text_client import TextGenerationClient
from food_logger.adapters.openai_transcription_client import TranscriptionClient
from food_logger.config import Settings
from food_logger.containers import AppContainer
from food_logger.domain.nutrition import FoodItem, TranscriptionResult
from food_logger.services.brands import BrandMatcher
from food_logger.services.extraction import ExtractionService
from food_logger.services.food_log import FoodLogService
from food_logger.services.insights import INSIGHT_SYSTEM_PROMPT, InsightService
from food_logger.services.transcription import TranscriptionService

COFFEE_AND_LAGER = json.dumps(
    {
        "meal": "General",
        "items": [
            {
                "name": "coffee",
                "estimatedCalories": 25,
                "context": None,
                "quantity": 5,
                "unit": "cup",
                "description": "5 cups of coffee",
            },
            {
                "name": "lager",
                "estimatedCalories": 540,
                "context": "from the pub",
                "quantity": 3,
                "unit": "pint",
                "description": "3 pints of lager",
            },
        ],
        "totalEstimatedCalories": 999,
    }
)

DEFAULT_INSIGHTS = json.dumps(
    [
        {
            "type": "info",
            "title": "Good to know",
            "message": "Enjoy in moderation.",
            "icon": "💡",
        }
    ]
)


@dataclass
class FakeTextClient(TextGenerationClient):
    """Fake text generation client with canned extraction and insight replies."""

    extraction_response: str | Exception | None = COFFEE_AND_LAGER
    insight_response: str | None = DEFAULT_INSIGHTS
    failing_items: set[str] = field(default_factory=set)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_message: str,
        temperature: float,
        max_tokens: int,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "system_prompt": system_prompt,
                "user_message": user_message,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if system_prompt == INSIGHT_SYSTEM_PROMPT:
            for name in self.failing_items:
                if f": {name} (" in user_message:
                    raise RuntimeError("insight service down")
            return self.insight_response
        if isinstance(self.extraction_response, Exception):
            raise self.extraction_response
        return self.extraction_response

    def insight_calls(self) -> list[dict[str, object]]:
        return [
            call
            for call in self.calls
            if call["system_prompt"] == INSIGHT_SYSTEM_PROMPT
        ]


@dataclass
class FakeTranscriptionClient(TranscriptionClient):
    """Fake transcription client returning a fixed transcript."""

    result: TranscriptionResult | Exception = field(
        default_factory=lambda: TranscriptionResult(
            text="I had 5 cups of coffee and 3 pints of lager", language="english"
        )
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def transcribe(
        self,
        *,
        model: str,
        audio: bytes,
        filename: str,
        language: str | None,
    ) -> TranscriptionResult:
        self.calls.append(
            {"model": model, "audio": audio, "filename": filename, "language": language}
        )
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def make_item(name: str, calories: float = 100, **kwargs: object) -> FoodItem:
    """Build a validated food item for tests."""
    return FoodItem(name=name, estimated_calories=calories, **kwargs)


def make_extraction_service(
    client: FakeTextClient, **kwargs: object
) -> ExtractionService:
    insight_service = InsightService(client=client, model="gpt-4o")
    return ExtractionService(
        client=client, insight_service=insight_service, model="gpt-4o", **kwargs
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def transcription_client() -> FakeTranscriptionClient:
    return FakeTranscriptionClient()


@pytest.fixture
def container(
    settings: Settings,
    text_client: FakeTextClient,
    transcription_client: FakeTranscriptionClient,
) -> AppContainer:
    brand_matcher = BrandMatcher()
    insight_service = InsightService(
        client=text_client,
        model=settings.openai_model,
        brand_matcher=brand_matcher,
    )
    extraction_service = ExtractionService(
        client=text_client,
        insight_service=insight_service,
        model=settings.openai_model,
    )
    transcription_service = TranscriptionService(
        client=transcription_client,
        model=settings.transcription_model,
        language=settings.transcription_language,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        brand_matcher=brand_matcher,
        food_log_service=FoodLogService(
            extraction_service=extraction_service,
            transcription_service=transcription_service,
        ),
        close_resources=close_resources,
    )
