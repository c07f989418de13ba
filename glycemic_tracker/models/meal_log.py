from glycemic_tracker.extensions import db
from glycemic_tracker.models.food import Food  # noqa: F401
from glycemic_tracker.utils.enums import MealType

class MealLogEntry(db.Model):
    __tablename__ = "meal_log_entries"

    id = db.Column(db.Integer, primary_key=True)
    # Checked against the catalog on creation only; foods stay deletable while referenced
    food_id = db.Column(db.Integer, nullable=False, index=True)
    consumed_at = db.Column(db.DateTime, nullable=False, index=True)
    grams_consumed = db.Column(db.Numeric(8,2), nullable=False)
    meal_type = db.Column(db.Integer, nullable=False)
    glycemic_load = db.Column(db.Numeric(10,2))

    food = db.relationship(
        "Food",
        primaryjoin="foreign(MealLogEntry.food_id) == Food.id",
        lazy="joined",
        viewonly=True,
    )

    @property
    def meal_type_enum(self):
        return MealType.parse(self.meal_type)
