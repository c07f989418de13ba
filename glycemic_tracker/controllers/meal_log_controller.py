"""
Meal Log Controller

Handles HTTP requests for meal log entries:
- Creating entries (glycemic load filled in from the food catalog)
- Listing by day, date range and today
- Retrieval and deletion by id
"""

from datetime import timezone
from flask import current_app, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from glycemic_tracker.extensions import db
from glycemic_tracker.schemas.meal_log_schema import CreateMealLogSchema
from glycemic_tracker.services.meal_log_service import (
    create_meal_log,
    delete_meal_log,
    get_meal_log,
    list_meal_logs_by_date,
    list_meal_logs_by_range,
    list_today_meal_logs,
    serialize_meal_log,
)
from glycemic_tracker.services.meal_log_validator import MealLogDraft, MealLogValidationError
from glycemic_tracker.utils.http import ok, error, json_body, validate_schema, parse_iso_date


def _items(entries):
    return ok({"items": [serialize_meal_log(e) for e in entries]})


def today_meal_logs_handler():
    return _items(list_today_meal_logs())


def get_meal_log_handler(meal_log_id: int):
    entry = get_meal_log(meal_log_id)
    if not entry:
        return error("NOT_FOUND", f"No meal log with id {meal_log_id}", 404)
    return ok(serialize_meal_log(entry))


def meal_logs_by_date_handler(day: str):
    parsed = parse_iso_date(day)
    if parsed is None:
        return error("VALIDATION_ERROR", "Invalid date format, use YYYY-MM-DD", 400)
    return _items(list_meal_logs_by_date(parsed))


def meal_logs_by_range_handler():
    """
    Query Parameters:
        - start (required): First day, YYYY-MM-DD
        - end (required): Last day (inclusive), YYYY-MM-DD
    """
    start = parse_iso_date(request.args.get("start"))
    if start is None:
        return error("VALIDATION_ERROR", "Invalid start date, use YYYY-MM-DD", 400)

    end = parse_iso_date(request.args.get("end"))
    if end is None:
        return error("VALIDATION_ERROR", "Invalid end date, use YYYY-MM-DD", 400)

    if start > end:
        return error("VALIDATION_ERROR", "Start date must be on or before end date", 400)

    return _items(list_meal_logs_by_range(start, end))


def create_meal_log_handler():
    """
    Create a meal log entry.

    Body Parameters:
        - food_id (required): Food from the catalog
        - grams_consumed (required): Portion in grams, > 0
        - meal_type (required): BREAKFAST/LUNCH/DINNER/SNACK or 1-4
        - consumed_at (optional): ISO timestamp, defaults to now
        - glycemic_load (optional): Computed from the food when omitted
    """
    body = json_body()
    candidate = None
    if body:
        data, errors = validate_schema(CreateMealLogSchema, body)
        if errors:
            return error("VALIDATION_ERROR", "Invalid meal log data", 400, details=errors)

        consumed_at = data["consumed_at"]
        if consumed_at is not None and consumed_at.tzinfo is not None:
            consumed_at = consumed_at.astimezone(timezone.utc).replace(tzinfo=None)

        candidate = MealLogDraft(
            food_id=data["food_id"],
            grams_consumed=data["grams_consumed"],
            meal_type=data["meal_type"],
            consumed_at=consumed_at,
            glycemic_load=data["glycemic_load"],
        )

    try:
        entry = create_meal_log(candidate)
    except MealLogValidationError as e:
        # Both InvalidInput and ReferenceNotFound map to 400
        return error(e.code, e.message, 400)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating meal log: {e}")
        return error("UNKNOWN_ERROR", "Could not create meal log", 500)

    location = url_for("meal_logs.get_meal_log", meal_log_id=entry.id)
    return ok(serialize_meal_log(entry), 201, headers={"Location": location})


def delete_meal_log_handler(meal_log_id: int):
    try:
        deleted = delete_meal_log(meal_log_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting meal log {meal_log_id}: {e}")
        return error("UNKNOWN_ERROR", "Could not delete meal log", 500)

    if not deleted:
        return error("NOT_FOUND", f"No meal log with id {meal_log_id}", 404)
    return ok({"message": "Meal log deleted"})
