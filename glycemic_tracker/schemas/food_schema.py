from marshmallow import Schema, fields, validate, EXCLUDE

class CreateFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    glycemic_index = fields.Int(required=True, strict=True, validate=validate.Range(min=0))
    carbs_per_100g = fields.Decimal(required=True, validate=validate.Range(min=0))
    data_source = fields.Str(allow_none=True, load_default=None, validate=validate.Length(max=150))

class UpdateFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(allow_none=True)
    name = fields.Str(validate=validate.Length(min=1, max=150))
    glycemic_index = fields.Int(strict=True, validate=validate.Range(min=0))
    carbs_per_100g = fields.Decimal(validate=validate.Range(min=0))
    data_source = fields.Str(allow_none=True, validate=validate.Length(max=150))
