"""Tests for nutrition log validation."""

import pytest

from food_logger.domain.errors import LogValidationError, ValidationReason
from food_logger.services.validation import filter_insights, validate_log


def _item(name: str = "apple", calories: object = 80, **extra: object) -> dict:
    return {"name": name, "estimatedCalories": calories, **extra}


def test_validate_log_builds_items_with_defaults() -> None:
    result = validate_log({"meal": "Snack", "items": [_item()]})

    assert result.meal == "Snack"
    item = result.items[0]
    assert item.name == "apple"
    assert item.estimated_calories == 80
    assert item.quantity == 1
    assert item.unit == "serving"
    assert item.context is None
    assert item.description == "1 serving apple"
    assert item.insights == []


def test_validate_log_keeps_optional_fields() -> None:
    raw = _item(
        "lager",
        540,
        quantity=3,
        unit="pint",
        context="from the pub",
        description="3 pints of lager",
    )

    item = validate_log({"meal": "Dinner", "items": [raw]}).items[0]

    assert item.quantity == 3
    assert item.unit == "pint"
    assert item.context == "from the pub"
    assert item.description == "3 pints of lager"


def test_validate_log_ignores_extra_fields() -> None:
    raw = {"meal": "Lunch", "items": [_item(brand="x")], "totalEstimatedCalories": 5}

    assert len(validate_log(raw).items) == 1


def test_validate_log_accepts_empty_items() -> None:
    assert validate_log({"meal": "General", "items": []}).items == []


@pytest.mark.parametrize("obj", [None, [], "text", 3])
def test_validate_log_rejects_non_objects(obj: object) -> None:
    with pytest.raises(LogValidationError) as exc_info:
        validate_log(obj)

    assert exc_info.value.reason is ValidationReason.NOT_AN_OBJECT


@pytest.mark.parametrize("meal", [None, 5, "   "])
def test_validate_log_rejects_missing_meal(meal: object) -> None:
    raw: dict[str, object] = {"items": []}
    if meal is not None:
        raw["meal"] = meal

    with pytest.raises(LogValidationError) as exc_info:
        validate_log(raw)

    assert exc_info.value.reason is ValidationReason.MISSING_MEAL


@pytest.mark.parametrize("items", [None, {"name": "apple"}, "apple"])
def test_validate_log_rejects_missing_items(items: object) -> None:
    raw: dict[str, object] = {"meal": "Lunch"}
    if items is not None:
        raw["items"] = items

    with pytest.raises(LogValidationError) as exc_info:
        validate_log(raw)

    assert exc_info.value.reason is ValidationReason.MISSING_ITEMS


def test_validate_log_rejects_whole_log_for_one_bad_item() -> None:
    items = [_item(f"item {index}", index * 10) for index in range(10)]
    items[6] = _item("bad", -5)

    with pytest.raises(LogValidationError) as exc_info:
        validate_log({"meal": "Lunch", "items": items})

    assert exc_info.value.reason is ValidationReason.MALFORMED_ITEM
    assert exc_info.value.index == 6
    assert "index 6" in str(exc_info.value)


@pytest.mark.parametrize(
    "raw_item",
    [
        {"estimatedCalories": 10},
        _item(""),
        _item("   "),
        _item(calories="80"),
        _item(calories=True),
        _item(calories=None),
        _item(calories=float("inf")),
        _item(quantity=0),
        _item(quantity=-1),
        _item(quantity="2"),
        _item(unit=3),
        _item(context=7),
        _item(description=["x"]),
        "apple",
    ],
)
def test_validate_log_rejects_malformed_items(raw_item: object) -> None:
    with pytest.raises(LogValidationError) as exc_info:
        validate_log({"meal": "Lunch", "items": [raw_item]})

    assert exc_info.value.reason is ValidationReason.MALFORMED_ITEM
    assert exc_info.value.index == 0


def test_filter_insights_drops_incomplete_entries() -> None:
    raw = [
        {"type": "warning", "title": "Alcohol", "message": "Go easy.", "icon": "🍺"},
        {"type": "info", "title": "Missing icon", "message": "No icon."},
        {"type": "shout", "title": "Bad type", "message": "x", "icon": "!"},
        {"type": "positive", "title": "", "message": "Empty title", "icon": "🥗"},
        "not an object",
        {"type": "positive", "title": "Fibre", "message": "Nice.", "icon": "🥗"},
    ]

    insights = filter_insights(raw)

    assert [insight.title for insight in insights] == ["Alcohol", "Fibre"]


def test_filter_insights_returns_empty_for_non_list() -> None:
    assert filter_insights({"type": "info"}) == []
