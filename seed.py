from decimal import Decimal
from glycemic_tracker import create_app
from glycemic_tracker.extensions import db
from glycemic_tracker.models.user import User
from glycemic_tracker.models.food import Food
from glycemic_tracker.utils.auth import hash_password

app = create_app()

FOODS = [
    # name, glycemic index, carbs per 100g, source
    ("Apple (red)", 38, 14.5, "USDA"),
    ("Banana", 51, 23.0, "USDA"),
    ("White rice, boiled", 73, 28.0, "USDA"),
    ("Whole wheat bread", 74, 41.3, "USDA"),
    ("Rolled oats", 55, 66.3, "USDA"),
    ("Lentils, boiled", 32, 20.1, "USDA"),
    ("Potato, boiled", 78, 20.0, "USDA"),
    ("Orange", 43, 11.8, "USDA"),
    ("Whole milk", 39, 4.8, "USDA"),
    ("Chickpeas, boiled", 28, 27.4, "USDA"),
]

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    if not User.query.filter_by(email="user@example.com").first():
        db.session.add(User(name="User Demo", email="user@example.com",
                            password=hash_password("secret")))

    for name, gi, carbs, source in FOODS:
        if not Food.query.filter_by(name=name).first():
            db.session.add(Food(
                name=name,
                glycemic_index=gi,
                carbs_per_100g=Decimal(str(carbs)),
                data_source=source,
            ))

    db.session.commit()
    print(f"Seeded {Food.query.count()} foods")
