"""Nutrition log domain models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from food_logger.domain.brands import BrandInfo

InsightType = Literal["warning", "info", "positive"]


class HealthInsight(BaseModel):
    """Short advisory note attached to a food item."""

    model_config = ConfigDict(str_strip_whitespace=True)

    type: InsightType
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    icon: str = Field(min_length=1)


class FoodItem(BaseModel):
    """Single food or drink extracted from a meal description."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    estimated_calories: float = Field(ge=0, alias="estimatedCalories")
    context: str | None = None
    quantity: float = Field(default=1, gt=0)
    unit: str = "serving"
    description: str = ""
    insights: list[HealthInsight] = Field(default_factory=list)
    brand: BrandInfo | None = None


class NutritionLog(BaseModel):
    """Structured nutrition record for one meal description."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    meal: str = Field(default="General", min_length=1)
    items: list[FoodItem] = Field(default_factory=list)
    total_estimated_calories: float = Field(
        default=0, ge=0, allow_inf_nan=False, alias="totalEstimatedCalories"
    )

    @classmethod
    def from_items(cls, meal: str, items: list[FoodItem]) -> "NutritionLog":
        """Build a log whose total is the exact sum of item calories."""
        total = sum(item.estimated_calories for item in items)
        return cls(meal=meal, items=items, total_estimated_calories=total)


class TranscriptionResult(BaseModel):
    """Plain text produced from an audio recording."""

    text: str = ""
    language: str | None = None
