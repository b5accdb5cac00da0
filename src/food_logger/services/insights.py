"""Per-item health insights generated concurrently."""

import asyncio
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

from food_logger.adapters.openai_text_client import TextGenerationClient
from food_logger.domain.nutrition import FoodItem, HealthInsight
from food_logger.services.brands import BrandMatcher
from food_logger.services.sanitizer import decode_json
from food_logger.services.validation import filter_insights

_logger = logging.getLogger(__name__)

INSIGHT_SYSTEM_PROMPT = """You are a health and nutrition expert. Analyze a single food item and give specific insights.

Guidelines:
1. Focus on the specific item (e.g. "6 pints of lager", "pizza", "coffee").
2. Give item-specific advice.
3. Keep insights brief and actionable.
4. Use a fitting emoji icon (🍺, ⚠️, 💡, 🎯, 🥗, 🏃, etc.).
5. Return ONLY a JSON array, no markdown and no other text.

Return format:
[
  {
    "type": "warning" | "info" | "positive",
    "title": "Brief title",
    "message": "Helpful message",
    "icon": "emoji"
  }
]

Examples:
- "6 pints of lager" -> high alcohol warning
- "pizza" -> processed food info
- "coffee" -> caffeine info
- "vegetables" -> positive nutrition"""


def describe_item(item: FoodItem) -> str:
    """Return the one-line summary of an item sent to the model."""
    return (
        f"{item.name} ({item.quantity:g} {item.unit}) - "
        f"{item.estimated_calories:g} calories"
    )


@dataclass
class InsightService:
    """Attach health insights and brand info to extracted items."""

    client: TextGenerationClient
    model: str
    brand_matcher: BrandMatcher = field(default_factory=BrandMatcher)
    temperature: float = 0.7
    max_tokens: int = 300
    timeout_seconds: float | None = None
    max_concurrency: int | None = None

    async def annotate(self, items: list[FoodItem]) -> list[FoodItem]:
        """Return copies of the items with insights and brand attached.

        Calls run concurrently and results keep the input order. An item whose
        call fails gets an empty insight list; errors never propagate.
        """
        limiter = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        )
        results = await asyncio.gather(
            *(self._annotate_item(item, limiter) for item in items)
        )
        return list(results)

    async def _annotate_item(
        self, item: FoodItem, limiter: asyncio.Semaphore | None
    ) -> FoodItem:
        async with limiter or nullcontext():
            insights = await self._generate_insights(item)
        return item.model_copy(
            update={
                "insights": insights,
                "brand": self.brand_matcher.match(item.context),
            }
        )

    async def _generate_insights(self, item: FoodItem) -> list[HealthInsight]:
        description = describe_item(item)
        try:
            response = await asyncio.wait_for(
                self.client.generate(
                    model=self.model,
                    system_prompt=INSIGHT_SYSTEM_PROMPT,
                    user_message=(
                        f"Analyze this food item: {description}\n\n"
                        "Provide specific health insights for this item."
                    ),
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout_seconds,
            )
            if not response:
                return []
            return filter_insights(decode_json(response, opener="["))
        except Exception as exc:
            _logger.warning("Insights unavailable for %s: %r", description, exc)
            return []
