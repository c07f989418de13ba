from glycemic_tracker.extensions import db

class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    glycemic_index = db.Column(db.Integer, nullable=False, default=0)
    carbs_per_100g = db.Column(db.Numeric(8,2), nullable=False, default=0)
    data_source = db.Column(db.String(150))
