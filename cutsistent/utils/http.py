from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if data is not None:
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, payload: Dict[str, Any], **kwargs) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load ``payload`` with a marshmallow schema, returning ``(data, errors)``."""
    try:
        return schema_cls(**kwargs).load(payload), None
    except ValidationError as err:
        return None, err.messages


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v
