import pytest
from werkzeug.security import generate_password_hash

from config import Config
from glycemic_tracker import create_app
from glycemic_tracker.extensions import db
from glycemic_tracker.models.food import Food
from glycemic_tracker.models.user import User


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SECRET_KEY = "test-secret"
    SMTP_SERVER = "smtp.test"
    SMTP_PORT = 587
    SMTP_TITLE = "Glycemic Tracker"
    SMTP_USERNAME = "noreply@example.com"
    SMTP_PASSWORD = "smtp-secret"


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        db.session.add(User(name="User Demo", email="user@example.com",
                            password=generate_password_hash("secret")))
        db.session.add(Food(name="Apple (red)", glycemic_index=38, carbs_per_100g=14.5, data_source="USDA"))
        db.session.add(Food(name="Banana", glycemic_index=51, carbs_per_100g=23.0))
        db.session.commit()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers(client):
    r = client.post("/api/auth/login", json={"email": "user@example.com", "password": "secret"})
    assert r.status_code == 200, r.data
    return {"Authorization": f"Bearer {r.get_json()['token']}"}


@pytest.fixture()
def foods(app):
    return {f.name: f.id for f in Food.query.all()}
