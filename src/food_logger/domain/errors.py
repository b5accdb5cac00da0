"""Error types raised by the food logging pipeline."""

from enum import Enum


class FoodLoggerError(Exception):
    """Base class for user-facing pipeline failures."""


class TranscriptionFailure(FoodLoggerError):
    """Speech-to-text was unreachable or produced no usable text."""


class ExtractionCause(str, Enum):
    """Reason an extraction could not produce a nutrition log."""

    MALFORMED_JSON = "malformed_json"
    INVALID_STRUCTURE = "invalid_structure"
    COLLABORATOR_UNREACHABLE = "collaborator_unreachable"
    INVALID_INPUT = "invalid_input"


class ExtractionFailure(FoodLoggerError):
    """Free text could not be turned into a validated nutrition log."""

    def __init__(self, cause: ExtractionCause, detail: str | None = None) -> None:
        self.cause = cause
        self.detail = detail
        message = cause.value if detail is None else f"{cause.value}: {detail}"
        super().__init__(message)


class ValidationReason(str, Enum):
    """Why a parsed collaborator response was rejected."""

    NOT_AN_OBJECT = "not_an_object"
    MISSING_MEAL = "missing_meal"
    MISSING_ITEMS = "missing_items"
    MALFORMED_ITEM = "malformed_item"


class LogValidationError(ValueError):
    """Parsed response does not match the nutrition log shape."""

    def __init__(self, reason: ValidationReason, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        if index is None:
            super().__init__(reason.value)
        else:
            super().__init__(f"{reason.value} at index {index}")
