from flask import current_app, request, url_for
from sqlalchemy.exc import SQLAlchemyError
from glycemic_tracker.extensions import db
from glycemic_tracker.models.food import Food
from glycemic_tracker.schemas.food_schema import CreateFoodSchema, UpdateFoodSchema
from glycemic_tracker.services.meal_log_service import serialize_food
from glycemic_tracker.utils.http import ok, error, json_body, validate_schema

def list_foods_handler():
    foods = Food.query.order_by(Food.name).all()
    return ok({"items": [serialize_food(f) for f in foods]})

def get_food_handler(food_id: int):
    food = db.session.get(Food, food_id)
    if not food:
        return error("NOT_FOUND", f"No food with id {food_id}", 404)
    return ok(serialize_food(food))

def search_foods_handler():
    """
    Search foods by partial, case-insensitive name.

    Query Parameters:
        - name (required): Name or part of the name
    """
    name = (request.args.get("name") or "").strip()
    if not name:
        return error("VALIDATION_ERROR", "Query parameter 'name' is required", 400)

    foods = (
        Food.query
        .filter(Food.name.ilike(f"%{name}%"))
        .order_by(Food.name)
        .all()
    )
    return ok({"items": [serialize_food(f) for f in foods]})

def create_food_handler():
    body = json_body()
    if body is None:
        return error("VALIDATION_ERROR", "Food must not be empty", 400)

    data, errors = validate_schema(CreateFoodSchema, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid food data", 400, details=errors)

    name = data["name"].strip()
    if not name:
        return error("VALIDATION_ERROR", "Name is required", 400)

    try:
        food = Food(
            name=name,
            glycemic_index=data["glycemic_index"],
            carbs_per_100g=data["carbs_per_100g"],
            data_source=data.get("data_source"),
        )
        db.session.add(food)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating food: {e}")
        return error("UNKNOWN_ERROR", "Could not create food", 500)

    location = url_for("foods.get_food", food_id=food.id)
    return ok(serialize_food(food), 201, headers={"Location": location})

def update_food_handler(food_id: int):
    body = json_body()
    if body is None:
        return error("VALIDATION_ERROR", "Food must not be empty", 400)

    data, errors = validate_schema(UpdateFoodSchema, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid food data", 400, details=errors)

    if data.get("id") is not None and data["id"] != food_id:
        return error("VALIDATION_ERROR", "URL id does not match food id", 400)

    food = db.session.get(Food, food_id)
    if not food:
        return error("NOT_FOUND", f"No food with id {food_id}", 404)

    if "name" in data:
        name = data["name"].strip()
        if not name:
            return error("VALIDATION_ERROR", "Name is required", 400)
        food.name = name
    if "glycemic_index" in data:
        food.glycemic_index = data["glycemic_index"]
    if "carbs_per_100g" in data:
        food.carbs_per_100g = data["carbs_per_100g"]
    if "data_source" in data:
        food.data_source = data["data_source"]

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating food {food_id}: {e}")
        return error("UNKNOWN_ERROR", "Could not update food", 500)

    return ok(serialize_food(food))

def delete_food_handler(food_id: int):
    food = db.session.get(Food, food_id)
    if not food:
        return error("NOT_FOUND", f"No food with id {food_id}", 404)

    try:
        db.session.delete(food)
        db.session.commit()
        return ok({"message": "Food deleted"})
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting food {food_id}: {e}")
        return error("UNKNOWN_ERROR", "Could not delete food", 500)
