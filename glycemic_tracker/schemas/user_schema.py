from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE
from glycemic_tracker.schemas.email_schema import validate_email_shape


def _not_blank(value: str):
    if not value.strip():
        raise ValidationError("Field may not be blank")


class CreateUserSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=[validate.Length(max=150), _not_blank])
    email = fields.Str(required=True, validate=[validate.Length(max=255), validate_email_shape])
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=6))
    is_active = fields.Bool(load_default=True)


class UpdateUserSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(allow_none=True)
    name = fields.Str(required=True, validate=[validate.Length(max=150), _not_blank])
    email = fields.Str(required=True, validate=[validate.Length(max=255), validate_email_shape])
    # Blank keeps the current password
    password = fields.Str(allow_none=True, load_default=None, load_only=True)
    is_active = fields.Bool()

    @validates("password")
    def validate_password(self, value, **kwargs):
        if value and value.strip() and len(value) < 6:
            raise ValidationError("Password must be at least 6 characters")


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Str(required=True, validate=_not_blank)
    password = fields.Str(required=True, validate=validate.Length(min=1))
