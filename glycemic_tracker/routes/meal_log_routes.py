from flask import Blueprint
from glycemic_tracker.utils.auth import require_auth
from glycemic_tracker.controllers.meal_log_controller import (
    today_meal_logs_handler,
    get_meal_log_handler,
    meal_logs_by_date_handler,
    meal_logs_by_range_handler,
    create_meal_log_handler,
    delete_meal_log_handler,
)

meal_log_bp = Blueprint("meal_logs", __name__, url_prefix="/api/meal-logs")

@meal_log_bp.get("/today")
@require_auth
def today_meal_logs():
    return today_meal_logs_handler()

@meal_log_bp.get("/<int:meal_log_id>")
@require_auth
def get_meal_log(meal_log_id):
    return get_meal_log_handler(meal_log_id)

@meal_log_bp.get("/date/<string:day>")
@require_auth
def meal_logs_by_date(day):
    return meal_logs_by_date_handler(day)

@meal_log_bp.get("/range")
@require_auth
def meal_logs_by_range():
    return meal_logs_by_range_handler()

@meal_log_bp.post("")
@require_auth
def create_meal_log():
    return create_meal_log_handler()

@meal_log_bp.delete("/<int:meal_log_id>")
@require_auth
def delete_meal_log(meal_log_id):
    return delete_meal_log_handler(meal_log_id)
