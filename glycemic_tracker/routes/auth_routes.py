from flask import Blueprint
from glycemic_tracker.controllers.auth_controller import login_handler, logout_handler, current_user_handler
from glycemic_tracker.utils.auth import require_auth

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("/login")
def login():
    return login_handler()


@auth_bp.post("/logout")
def logout():
    return logout_handler()


@auth_bp.get("/current-user")
@require_auth
def current_user():
    return current_user_handler()
