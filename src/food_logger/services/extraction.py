"""Structured nutrition extraction from free-text meal descriptions."""

import asyncio
import logging
import math
from dataclasses import dataclass

from food_logger.adapters.openai_text_client import TextGenerationClient
from food_logger.domain.errors import (
    ExtractionCause,
    ExtractionFailure,
    LogValidationError,
)
from food_logger.domain.nutrition import NutritionLog
from food_logger.services.insights import InsightService
from food_logger.services.sanitizer import decode_json
from food_logger.services.validation import validate_log

_logger = logging.getLogger(__name__)

# Per-unit anchors given to the model; not enforced locally.
CALORIE_REFERENCE: tuple[tuple[str, int], ...] = (
    ("1 cup of coffee", 5),
    ("1 pint of lager", 180),
    ("1 slice of pizza", 200),
    ("1 sandwich", 300),
    ("1 cup of tea", 2),
    ("1 banana", 100),
    ("1 apple", 80),
    ("1 serving of lasagna", 400),
    ("1 slice of cheesecake", 300),
    ("1 cup of salad", 20),
)

_RESPONSE_SHAPE = """{
  "meal": "string",
  "items": [
    {
      "name": "string",
      "estimatedCalories": number,
      "context": "string | null",
      "quantity": number,
      "unit": "string",
      "description": "string"
    }
  ]
}"""


def build_system_prompt() -> str:
    """Return the fixed instructions for meal extraction."""
    reference = "\n".join(
        f"- {label} = {calories} calories" for label, calories in CALORIE_REFERENCE
    )
    return (
        "You are an expert nutritional assistant. Parse the user's description "
        "of what they ate and convert it into a structured JSON object.\n\n"
        "Instructions:\n"
        "1. Identify the mealtime mentioned (e.g. 'breakfast', 'lunch', "
        "'dinner', 'snack'). If none is mentioned, set meal to 'General'.\n"
        "2. List every distinct food and drink item. If there is no food or "
        "drink in the text, return an empty items array.\n"
        "3. For each item, extract the quantity and unit if mentioned "
        '(e.g. "6 pints", "2 slices", "1 cup", "500ml"). Use quantity 1 and '
        'unit "serving" otherwise.\n'
        "4. For each item, estimate the calories PER UNIT, then multiply by the "
        "quantity. estimatedCalories is the total for the stated quantity.\n"
        "5. If the user mentions a brand or place (e.g. 'from Pret', "
        "'Cadbury'), use it to refine the estimate and put it in 'context'; "
        "otherwise set context to null.\n"
        "6. Write a short description that includes the quantity and unit.\n\n"
        "CALORIE REFERENCE (per unit):\n"
        f"{reference}\n\n"
        "MULTIPLY the per-unit calories by the quantity mentioned.\n\n"
        "Respond with ONLY one valid JSON object. No markdown, no code blocks, "
        "no explanatory text.\n\n"
        f"The JSON structure must be:\n{_RESPONSE_SHAPE}"
    )


SYSTEM_PROMPT = build_system_prompt()


@dataclass
class ExtractionService:
    """Drive the model to extract a validated nutrition log from text."""

    client: TextGenerationClient
    insight_service: InsightService
    model: str
    temperature: float = 0.3
    max_tokens: int = 1000
    timeout_seconds: float | None = None

    async def extract(self, raw_text: str) -> NutritionLog:
        """Extract food items from text, validate them and attach insights.

        The total is recomputed from item calories; any total reported by the
        model is ignored. A response with no items yields an empty log.
        """
        text = raw_text.strip() if isinstance(raw_text, str) else ""
        if not text:
            raise ExtractionFailure(
                ExtractionCause.INVALID_INPUT, "empty food description"
            )
        _logger.info("Extracting nutrition from text: %s", text[:100])

        try:
            response = await asyncio.wait_for(
                self.client.generate(
                    model=self.model,
                    system_prompt=SYSTEM_PROMPT,
                    user_message=f'Please parse this food log: "{text}"',
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout_seconds,
            )
        except Exception as exc:
            _logger.warning("Extraction call failed: %r", exc)
            raise ExtractionFailure(
                ExtractionCause.COLLABORATOR_UNREACHABLE, str(exc) or None
            ) from exc
        if not response or not response.strip():
            raise ExtractionFailure(
                ExtractionCause.COLLABORATOR_UNREACHABLE, "empty response"
            )

        try:
            parsed = decode_json(response)
        except ValueError as exc:
            _logger.warning("Extraction response is not JSON: %s", exc)
            raise ExtractionFailure(ExtractionCause.MALFORMED_JSON, str(exc)) from exc

        try:
            validated = validate_log(parsed)
        except LogValidationError as exc:
            _logger.warning("Extraction response rejected: %s", exc)
            raise ExtractionFailure(
                ExtractionCause.INVALID_STRUCTURE, str(exc)
            ) from exc
        total = sum(item.estimated_calories for item in validated.items)
        if not math.isfinite(total):
            _logger.warning("Extraction response rejected: calorie total overflows")
            raise ExtractionFailure(
                ExtractionCause.INVALID_STRUCTURE, "calorie total is not finite"
            )

        items = await self.insight_service.annotate(validated.items)
        log = NutritionLog.from_items(validated.meal, items)
        _logger.info(
            "Extracted %s items (%s kcal) for %s",
            len(log.items),
            log.total_estimated_calories,
            log.meal,
        )
        return log
