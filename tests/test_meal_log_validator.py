from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from glycemic_tracker.services.meal_log_validator import (
    InvalidInput,
    MealLogDraft,
    ReferenceNotFound,
    prepare_for_creation,
)
from glycemic_tracker.utils.enums import MealType

APPLE = SimpleNamespace(id=1, carbs_per_100g=Decimal("14.5"), glycemic_index=38)


def lookup(food_id):
    return APPLE if food_id == 1 else None


def draft(**overrides):
    values = dict(food_id=1, grams_consumed=150, meal_type="BREAKFAST")
    values.update(overrides)
    return MealLogDraft(**values)


def test_fills_glycemic_load_and_timestamp():
    before = datetime.utcnow()
    result = prepare_for_creation(draft(), lookup)
    assert result.glycemic_load == Decimal("8.27")
    assert result.consumed_at >= before
    assert result.meal_type is MealType.BREAKFAST
    assert result.id is None


def test_candidate_is_not_mutated():
    candidate = draft()
    prepare_for_creation(candidate, lookup)
    assert candidate.glycemic_load is None
    assert candidate.consumed_at is None


def test_null_entry_rejected():
    with pytest.raises(InvalidInput) as exc:
        prepare_for_creation(None, lookup)
    assert exc.value.message == "entry must not be null"


def test_unknown_food_rejected_without_computing():
    calls = []

    def tracking_lookup(food_id):
        calls.append(food_id)
        return None

    with pytest.raises(ReferenceNotFound) as exc:
        prepare_for_creation(draft(food_id=99), tracking_lookup)
    assert exc.value.code == "FOOD_NOT_FOUND"
    assert calls == [99]


def test_unknown_food_reported_before_bad_grams():
    with pytest.raises(ReferenceNotFound):
        prepare_for_creation(draft(food_id=99, grams_consumed=0, meal_type="BRUNCH"), lookup)


@pytest.mark.parametrize("grams", [0, -1, -0.01, Decimal("0"), None, "abc", True])
def test_non_positive_grams_rejected(grams):
    with pytest.raises(InvalidInput) as exc:
        prepare_for_creation(draft(grams_consumed=grams, meal_type="BRUNCH"), lookup)
    assert exc.value.message == "grams consumed must be greater than zero"


@pytest.mark.parametrize("meal_type", ["BRUNCH", 0, 5, None, "", 2.5, "²", "①", "9" * 5000])
def test_unknown_meal_type_rejected(meal_type):
    with pytest.raises(InvalidInput) as exc:
        prepare_for_creation(draft(meal_type=meal_type), lookup)
    assert exc.value.message == "meal type not recognized"


@pytest.mark.parametrize("meal_type,expected", [
    (1, MealType.BREAKFAST),
    ("2", MealType.LUNCH),
    ("dinner", MealType.DINNER),
    (MealType.SNACK, MealType.SNACK),
])
def test_meal_type_conversion(meal_type, expected):
    assert prepare_for_creation(draft(meal_type=meal_type), lookup).meal_type is expected


def test_supplied_timestamp_kept():
    eaten = datetime(2024, 3, 1, 8, 30)
    assert prepare_for_creation(draft(consumed_at=eaten), lookup).consumed_at == eaten


def test_supplied_glycemic_load_passed_through():
    result = prepare_for_creation(draft(glycemic_load=Decimal("42.5")), lookup)
    assert result.glycemic_load == Decimal("42.5")


def test_supplied_zero_glycemic_load_is_not_recomputed():
    assert prepare_for_creation(draft(glycemic_load=Decimal("0")), lookup).glycemic_load == Decimal("0")


def test_lookup_errors_propagate():
    def broken_lookup(food_id):
        raise RuntimeError("catalog unavailable")

    with pytest.raises(RuntimeError):
        prepare_for_creation(draft(), broken_lookup)
