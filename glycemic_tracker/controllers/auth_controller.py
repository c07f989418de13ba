from flask import current_app, request
from glycemic_tracker.extensions import db
from glycemic_tracker.models.user import User
from glycemic_tracker.controllers.user_controller import authenticate, serialize_user
from glycemic_tracker.schemas.user_schema import LoginSchema
from glycemic_tracker.utils.auth import create_token
from glycemic_tracker.utils.http import ok, error, json_body, validate_schema

def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400)

    user = authenticate(data["email"], data["password"])
    if not user:
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    token = create_token(user.id, user.email)
    current_app.logger.info(f"User {user.email} logged in")
    return ok({
        "message": "Login successful",
        "token": token,
        "user": serialize_user(user),
    })

def logout_handler():
    """
    Handle logout request.
    Tokens are stateless JWTs, so the client discards its token; this
    endpoint only confirms the action.
    """
    return ok({"message": "Logged out successfully"})

def current_user_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)
    return ok(serialize_user(user))
