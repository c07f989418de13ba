"""
Meal Log Validation

Gates creation of meal log entries: checks the food reference and the
entry's values, then fills in the timestamp and glycemic load.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from glycemic_tracker.services.glycemic_load import compute_glycemic_load, to_decimal
from glycemic_tracker.utils.enums import MealType


class MealLogValidationError(Exception):
    code = "VALIDATION_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(MealLogValidationError):
    code = "INVALID_INPUT"


class ReferenceNotFound(MealLogValidationError):
    code = "FOOD_NOT_FOUND"


@dataclass
class MealLogDraft:
    """A meal log entry that has not been stored yet."""
    food_id: Any
    grams_consumed: Any
    meal_type: Any
    consumed_at: Optional[datetime] = None
    glycemic_load: Optional[Decimal] = None
    id: Optional[int] = None


def _positive_grams(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        grams = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not grams.is_finite() or grams <= 0:
        return None
    return grams


def prepare_for_creation(
    candidate: Optional[MealLogDraft],
    lookup_food_by_id: Callable[[Any], Any],
) -> MealLogDraft:
    """
    Validate a candidate entry and fill in derived fields.

    Checks run in a fixed order and the first failure is raised:
    null entry, unknown food, non-positive grams, unknown meal type.

    Args:
        candidate: Entry to validate, identifier not yet assigned
        lookup_food_by_id: Returns the Food for an id, or None

    Returns:
        A new draft with ``consumed_at`` and ``glycemic_load`` populated

    Raises:
        InvalidInput: Null entry, grams <= 0 or unrecognized meal type
        ReferenceNotFound: No food with the referenced id
    """
    if candidate is None:
        raise InvalidInput("entry must not be null")

    food = lookup_food_by_id(candidate.food_id)
    if food is None:
        raise ReferenceNotFound("no food with this identifier")

    grams = _positive_grams(candidate.grams_consumed)
    if grams is None:
        raise InvalidInput("grams consumed must be greater than zero")

    meal_type = MealType.parse(candidate.meal_type)
    if meal_type is None:
        raise InvalidInput("meal type not recognized")

    consumed_at = candidate.consumed_at
    if consumed_at is None:
        consumed_at = datetime.utcnow()

    glycemic_load = candidate.glycemic_load
    if glycemic_load is None:
        glycemic_load = compute_glycemic_load(food, grams)

    return replace(
        candidate,
        grams_consumed=grams,
        meal_type=meal_type,
        consumed_at=consumed_at,
        glycemic_load=glycemic_load,
    )
