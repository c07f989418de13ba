from marshmallow import Schema, fields, EXCLUDE

class CreateMealLogSchema(Schema):
    """Type coercion only; value rules are checked by prepare_for_creation."""
    class Meta:
        unknown = EXCLUDE

    food_id = fields.Int(allow_none=True, load_default=None)
    grams_consumed = fields.Raw(allow_none=True, load_default=None)
    meal_type = fields.Raw(allow_none=True, load_default=None)
    consumed_at = fields.DateTime(allow_none=True, load_default=None)
    glycemic_load = fields.Decimal(allow_none=True, load_default=None)
