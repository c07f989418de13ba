from flask import Blueprint
from glycemic_tracker.utils.auth import require_auth
from glycemic_tracker.controllers.email_controller import send_email_handler, send_email_multiple_handler

email_bp = Blueprint("email", __name__, url_prefix="/api/email")

@email_bp.post("/send")
@require_auth
def send_email():
    return send_email_handler()

@email_bp.post("/send-multiple")
@require_auth
def send_email_multiple():
    return send_email_multiple_handler()
