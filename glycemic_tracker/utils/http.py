from typing import Any, Dict, Optional, Tuple
from datetime import date, datetime
from flask import request, jsonify
from marshmallow import ValidationError

def ok(payload: Any, status: int = 200, headers: Optional[Dict[str, str]] = None):
    if headers:
        return jsonify(payload), status, headers
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Optional[Dict[str, Any]]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return None


def validate_schema(schema_cls, data) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    """Load ``data`` through a marshmallow schema, returning (data, errors)."""
    try:
        return schema_cls().load(data or {}), None
    except ValidationError as e:
        return {}, e.messages


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def parse_iso_date(value: Any) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` (a full ISO timestamp is accepted and truncated)."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        parsed = parse_iso_datetime(text)
        return parsed.date() if parsed else None


def to_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None
