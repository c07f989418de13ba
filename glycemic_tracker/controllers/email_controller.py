from flask import current_app
from glycemic_tracker.schemas.email_schema import SendEmailSchema, SendEmailMultipleSchema
from glycemic_tracker.services.email_service import EmailService, SmtpSettings
from glycemic_tracker.utils.http import ok, error, json_body, validate_schema

def _email_service() -> EmailService:
    return EmailService(SmtpSettings.from_config(current_app.config))

def _send(schema_cls):
    body = json_body()
    if body is None:
        return error("VALIDATION_ERROR", "Request must not be empty", 400)

    data, errors = validate_schema(schema_cls, body)
    if errors:
        return error("VALIDATION_ERROR", "Invalid email request", 400, details=errors)

    sent = _email_service().send(data["to"], data["subject"], data["body"], data["is_html"])
    if not sent:
        return error("EMAIL_FAILED", "Email could not be sent", 500)
    return ok({"message": "Email sent", "to": data["to"]})

def send_email_handler():
    return _send(SendEmailSchema)

def send_email_multiple_handler():
    return _send(SendEmailMultipleSchema)
