"""
Meal Log Service

Handles meal log operations including creation, retrieval and deletion.
"""

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional
from sqlalchemy import desc

from glycemic_tracker.extensions import db
from glycemic_tracker.models.food import Food
from glycemic_tracker.models.meal_log import MealLogEntry
from glycemic_tracker.services.meal_log_validator import MealLogDraft, prepare_for_creation
from glycemic_tracker.utils.http import to_float

logger = logging.getLogger(__name__)


def find_food_by_id(food_id: Any) -> Optional[Food]:
    try:
        food_id = int(food_id)
    except (TypeError, ValueError):
        return None
    return db.session.get(Food, food_id)


def create_meal_log(candidate: Optional[MealLogDraft]) -> MealLogEntry:
    """
    Validate and store a meal log entry.

    Args:
        candidate: Entry as received from the client

    Returns:
        The stored MealLogEntry

    Raises:
        MealLogValidationError: If the entry is rejected
    """
    draft = prepare_for_creation(candidate, find_food_by_id)

    entry = MealLogEntry(
        food_id=int(draft.food_id),
        consumed_at=draft.consumed_at,
        grams_consumed=draft.grams_consumed,
        meal_type=draft.meal_type.value,
        glycemic_load=draft.glycemic_load,
    )
    db.session.add(entry)
    db.session.commit()

    logger.info("Meal log %s created for food %s (glycemic load %s)", entry.id, entry.food_id, entry.glycemic_load)
    return entry


def get_meal_log(meal_log_id: int) -> Optional[MealLogEntry]:
    return db.session.get(MealLogEntry, meal_log_id)


def list_meal_logs_by_range(start_date: date, end_date: date) -> List[MealLogEntry]:
    """List entries consumed between two calendar days (inclusive), newest first."""
    start = datetime.combine(start_date, time.min)
    end = datetime.combine(end_date, time.max)
    return (
        MealLogEntry.query
        .filter(MealLogEntry.consumed_at >= start, MealLogEntry.consumed_at <= end)
        .order_by(desc(MealLogEntry.consumed_at))
        .all()
    )


def list_meal_logs_by_date(day: date) -> List[MealLogEntry]:
    return list_meal_logs_by_range(day, day)


def list_today_meal_logs() -> List[MealLogEntry]:
    return list_meal_logs_by_date(datetime.utcnow().date())


def delete_meal_log(meal_log_id: int) -> bool:
    entry = db.session.get(MealLogEntry, meal_log_id)
    if not entry:
        return False

    db.session.delete(entry)
    db.session.commit()
    logger.info("Meal log %s deleted", meal_log_id)
    return True


def serialize_food(food: Food) -> Dict[str, Any]:
    return {
        "id": food.id,
        "name": food.name,
        "glycemic_index": food.glycemic_index,
        "carbs_per_100g": to_float(food.carbs_per_100g),
        "data_source": food.data_source,
    }


def serialize_meal_log(entry: MealLogEntry) -> Dict[str, Any]:
    meal_type = entry.meal_type_enum
    return {
        "id": entry.id,
        "food_id": entry.food_id,
        "consumed_at": entry.consumed_at.isoformat() if entry.consumed_at else None,
        "grams_consumed": to_float(entry.grams_consumed),
        "meal_type": meal_type.name if meal_type else None,
        "glycemic_load": to_float(entry.glycemic_load),
        "food": serialize_food(entry.food) if entry.food else None,
    }
