from decimal import Decimal
from types import SimpleNamespace

import pytest

from glycemic_tracker.services.glycemic_load import compute_glycemic_load


def make_food(carbs_per_100g, glycemic_index):
    return SimpleNamespace(carbs_per_100g=carbs_per_100g, glycemic_index=glycemic_index)


def test_apple_portion_rounds_half_up():
    # 21.75 g carbs -> 8.265 before rounding
    assert compute_glycemic_load(make_food(14.5, 38), 150) == Decimal("8.27")


def test_banana_reference_portion_is_exact():
    assert compute_glycemic_load(make_food(23.0, 51), 100) == Decimal("11.73")


def test_accepts_decimal_inputs():
    food = make_food(Decimal("14.50"), 38)
    assert compute_glycemic_load(food, Decimal("150.00")) == Decimal("8.27")


def test_result_has_two_decimal_places():
    result = compute_glycemic_load(make_food(66.3, 55), 40)
    assert result.as_tuple().exponent == -2
    assert result == Decimal("14.59")


@pytest.mark.parametrize("carbs,gi", [(0, 70), (20, 0)])
def test_zero_carbs_or_index_gives_zero(carbs, gi):
    assert compute_glycemic_load(make_food(carbs, gi), 250) == Decimal("0.00")


def test_non_decreasing_in_grams():
    food = make_food(28.0, 73)
    loads = [compute_glycemic_load(food, g) for g in (1, 10, 55.5, 100, 180, 500)]
    assert loads == sorted(loads)


def test_non_decreasing_in_glycemic_index():
    loads = [compute_glycemic_load(make_food(20.1, gi), 120) for gi in (0, 15, 32, 50, 99, 140)]
    assert loads == sorted(loads)
