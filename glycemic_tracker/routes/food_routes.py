from flask import Blueprint
from glycemic_tracker.utils.auth import require_auth
from glycemic_tracker.controllers.food_controller import (
    list_foods_handler,
    get_food_handler,
    search_foods_handler,
    create_food_handler,
    update_food_handler,
    delete_food_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/api/foods")

@food_bp.get("")
@require_auth
def list_foods():
    return list_foods_handler()

@food_bp.get("/search")
@require_auth
def search_foods():
    return search_foods_handler()

@food_bp.get("/<int:food_id>")
@require_auth
def get_food(food_id):
    return get_food_handler(food_id)

@food_bp.post("")
@require_auth
def create_food():
    return create_food_handler()

@food_bp.put("/<int:food_id>")
@require_auth
def update_food(food_id):
    return update_food_handler(food_id)

@food_bp.delete("/<int:food_id>")
@require_auth
def delete_food(food_id):
    return delete_food_handler(food_id)
