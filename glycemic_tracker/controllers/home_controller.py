from datetime import datetime
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from glycemic_tracker.extensions import db

def home_index():
    return jsonify({
        "message": "Glycemic Tracker API",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": datetime.utcnow().isoformat(),
    })
