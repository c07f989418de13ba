from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE


def validate_single_line(value: str):
    # Header values may not contain line breaks
    if "\r" in value or "\n" in value:
        raise ValidationError("Line breaks are not allowed")


def validate_email_shape(value: str):
    validate_single_line(value)
    if "@" not in value or "." not in value:
        raise ValidationError(f"'{value}' is not a valid email address")


class SendEmailSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    to = fields.Str(required=True, validate=[validate.Length(min=1), validate_email_shape])
    subject = fields.Str(required=True, validate=validate_single_line)
    body = fields.Str(required=True)
    is_html = fields.Bool(load_default=True)

    @validates("subject")
    def validate_subject(self, value, **kwargs):
        if not value.strip():
            raise ValidationError("Subject is required")

    @validates("body")
    def validate_body(self, value, **kwargs):
        if not value.strip():
            raise ValidationError("Body is required")


class SendEmailMultipleSchema(SendEmailSchema):
    to = fields.List(
        fields.Str(validate=validate_email_shape),
        required=True,
        validate=validate.Length(min=1, error="At least one recipient is required"),
    )
