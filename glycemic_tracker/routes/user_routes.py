from flask import Blueprint
from glycemic_tracker.utils.auth import require_auth
from glycemic_tracker.controllers.user_controller import (
    list_users_handler,
    get_user_handler,
    get_user_by_email_handler,
    create_user_handler,
    update_user_handler,
    delete_user_handler,
    authenticate_handler,
)

user_bp = Blueprint("users", __name__, url_prefix="/api/users")

@user_bp.get("")
@require_auth
def list_users():
    return list_users_handler()

@user_bp.get("/<int:user_id>")
@require_auth
def get_user(user_id):
    return get_user_handler(user_id)

@user_bp.get("/email/<string:email>")
@require_auth
def get_user_by_email(email):
    return get_user_by_email_handler(email)

# Registration is open
@user_bp.post("")
def create_user():
    return create_user_handler()

@user_bp.put("/<int:user_id>")
@require_auth
def update_user(user_id):
    return update_user_handler(user_id)

@user_bp.delete("/<int:user_id>")
@require_auth
def delete_user(user_id):
    return delete_user_handler(user_id)

@user_bp.post("/authenticate")
def authenticate():
    return authenticate_handler()
