from datetime import datetime
from flask import current_app, url_for
from sqlalchemy.exc import SQLAlchemyError
from glycemic_tracker.extensions import db
from glycemic_tracker.models.user import User
from glycemic_tracker.schemas.user_schema import CreateUserSchema, UpdateUserSchema, LoginSchema
from glycemic_tracker.utils.auth import check_password_hash, hash_password
from glycemic_tracker.utils.http import ok, error, json_body, validate_schema

def serialize_user(user: User):
    # Password hash never leaves the server
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "created_at": user.created_at.isoformat() if user.created_at else None,
        "is_active": user.is_active,
    }

def authenticate(email: str, password: str):
    """Return the active user matching the credentials, or None."""
    user = User.query.filter_by(email=email.strip().lower()).first()
    if not user or not user.is_active:
        return None
    if not check_password_hash(user.password, password):
        return None
    return user

def list_users_handler():
    users = User.query.order_by(User.name).all()
    return ok({"items": [serialize_user(u) for u in users]})

def get_user_handler(user_id: int):
    user = db.session.get(User, user_id)
    if not user:
        return error("NOT_FOUND", f"No user with id {user_id}", 404)
    return ok(serialize_user(user))

def get_user_by_email_handler(email: str):
    user = User.query.filter_by(email=email.strip().lower()).first()
    if not user:
        return error("NOT_FOUND", f"No user with email {email}", 404)
    return ok(serialize_user(user))

def create_user_handler():
    body = json_body()
    if body is None:
        return error("VALIDATION_ERROR", "User must not be empty", 400)

    data, errors = validate_schema(CreateUserSchema, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid user data", 400, details=errors)

    email = data["email"].strip().lower()
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", f"A user with email {email} already exists", 409)

    try:
        user = User(
            name=data["name"].strip(),
            email=email,
            password=hash_password(data["password"]),
            created_at=datetime.utcnow(),
            is_active=data["is_active"],
        )
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating user: {e}")
        return error("UNKNOWN_ERROR", "Could not create user", 500)

    location = url_for("users.get_user", user_id=user.id)
    return ok(serialize_user(user), 201, headers={"Location": location})

def update_user_handler(user_id: int):
    body = json_body()
    if body is None:
        return error("VALIDATION_ERROR", "User must not be empty", 400)

    data, errors = validate_schema(UpdateUserSchema, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid user data", 400, details=errors)

    if data.get("id") is not None and data["id"] != user_id:
        return error("VALIDATION_ERROR", "URL id does not match user id", 400)

    user = db.session.get(User, user_id)
    if not user:
        return error("NOT_FOUND", f"No user with id {user_id}", 404)

    email = data["email"].strip().lower()
    other = User.query.filter(User.email == email, User.id != user_id).first()
    if other:
        return error("EMAIL_IN_USE", f"Email {email} is used by another user", 409)

    user.name = data["name"].strip()
    user.email = email
    if "is_active" in data:
        user.is_active = data["is_active"]
    password = data.get("password")
    if password and password.strip():
        user.password = hash_password(password)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating user {user_id}: {e}")
        return error("UNKNOWN_ERROR", "Could not update user", 500)

    return ok(serialize_user(user))

def delete_user_handler(user_id: int):
    user = db.session.get(User, user_id)
    if not user:
        return error("NOT_FOUND", f"No user with id {user_id}", 404)

    try:
        db.session.delete(user)
        db.session.commit()
        return ok({"message": "User deleted"})
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting user {user_id}: {e}")
        return error("UNKNOWN_ERROR", "Could not delete user", 500)

def authenticate_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400)

    user = authenticate(data["email"], data["password"])
    if not user:
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)
    return ok(serialize_user(user))
