from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///glycemic_tracker.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Pool settings for long-lived server connections (MySQL/PostgreSQL)
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,  # Test connection before use
        'pool_recycle': 300,    # Recycle connections every 5 minutes
    }

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))

    # Outgoing mail
    SMTP_SERVER = os.getenv("SMTP_SERVER", "localhost")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_TITLE = os.getenv("SMTP_TITLE", "Glycemic Tracker")
    SMTP_USERNAME = os.getenv("SMTP_USERNAME", "")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
    SMTP_TIMEOUT = int(os.getenv("SMTP_TIMEOUT", "10"))
