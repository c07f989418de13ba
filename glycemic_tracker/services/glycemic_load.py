"""
Glycemic Load Calculation

Glycemic load estimates the blood-glucose impact of a specific portion:

    carbs_in_portion = carbs_per_100g / 100 * grams_consumed
    glycemic_load    = glycemic_index * carbs_in_portion / 100

The result is rounded to two decimals, half away from zero (8.265 -> 8.27).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Union

Number = Union[int, float, Decimal, str]

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal(100)


def to_decimal(value: Number) -> Decimal:
    """Convert without picking up binary float noise (8.265 stays 8.265)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_glycemic_load(food: Any, grams_consumed: Number) -> Decimal:
    """
    Compute the glycemic load of eating ``grams_consumed`` grams of ``food``.

    Args:
        food: Object with ``carbs_per_100g`` and ``glycemic_index``
        grams_consumed: Portion size in grams (validated by the caller)

    Returns:
        Glycemic load rounded to two decimal places
    """
    carbs_in_portion = to_decimal(food.carbs_per_100g) / HUNDRED * to_decimal(grams_consumed)
    glycemic_load = to_decimal(food.glycemic_index) * carbs_in_portion / HUNDRED
    return glycemic_load.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
