"""Structural validation of parsed model output."""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from food_logger.domain.errors import LogValidationError, ValidationReason
from food_logger.domain.nutrition import FoodItem, HealthInsight

_logger = logging.getLogger(__name__)


class _ItemPayload(BaseModel):
    """Shape of one extracted item as returned by the model."""

    model_config = ConfigDict(strict=True, extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    estimated_calories: float = Field(
        alias="estimatedCalories", ge=0, allow_inf_nan=False
    )
    quantity: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    unit: str | None = None
    context: str | None = None
    description: str | None = None

    @field_validator("estimated_calories", "quantity", mode="before")
    @classmethod
    def _reject_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("expected a number")
        return value

    def to_food_item(self) -> FoodItem:
        quantity = self.quantity if self.quantity is not None else 1
        unit = self.unit or "serving"
        description = self.description or f"{quantity:g} {unit} {self.name}"
        return FoodItem(
            name=self.name,
            estimated_calories=self.estimated_calories,
            context=self.context or None,
            quantity=quantity,
            unit=unit,
            description=description,
        )


class ValidatedLog(BaseModel):
    """Meal name and items that passed structural validation."""

    meal: str
    items: list[FoodItem]


def validate_log(obj: object) -> ValidatedLog:
    """Check a parsed response against the nutrition log shape.

    The whole log is rejected if any single item is malformed. Raises
    ``LogValidationError`` naming the reason (and item index when relevant).
    """
    if not isinstance(obj, dict):
        raise LogValidationError(ValidationReason.NOT_AN_OBJECT)
    meal = obj.get("meal")
    if not isinstance(meal, str) or not meal.strip():
        raise LogValidationError(ValidationReason.MISSING_MEAL)
    raw_items = obj.get("items")
    if not isinstance(raw_items, list):
        raise LogValidationError(ValidationReason.MISSING_ITEMS)

    items: list[FoodItem] = []
    for index, raw_item in enumerate(raw_items):
        try:
            payload = _ItemPayload.model_validate(raw_item)
        except ValidationError as exc:
            _logger.warning(
                "Rejected item %s: %s", index, exc.errors(include_url=False)
            )
            raise LogValidationError(ValidationReason.MALFORMED_ITEM, index) from exc
        items.append(payload.to_food_item())
    return ValidatedLog(meal=meal.strip(), items=items)


def filter_insights(obj: object) -> list[HealthInsight]:
    """Keep well-formed insight objects from a parsed array, dropping the rest."""
    if not isinstance(obj, list):
        return []
    insights: list[HealthInsight] = []
    for raw in obj:
        try:
            insights.append(HealthInsight.model_validate(raw))
        except ValidationError:
            continue
    return insights
