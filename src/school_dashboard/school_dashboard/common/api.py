from __future__ import annotations

import logging
from functools import wraps
from typing import Optional, Sequence

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, errors: Optional[Sequence[dict]] = None):
    body = {"message": message}
    if errors:
        body["errors"] = list(errors)
    return jsonify(body), status


def parse_id(raw: str, label: str) -> int:
    """Route ids are taken as strings so a bad id answers 400 instead of Flask's 404."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID")


def json_body() -> object:
    return request.get_json(silent=True)


def handle_errors(action: str):
    """Translate domain exceptions of a JSON view into HTTP responses.

    ValidationError -> 400, NotFoundError -> 404, anything else -> 500 "Failed to <action>".
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return error_response(str(e), 400, e.errors)
            except NotFoundError as e:
                return error_response(str(e), 404)
            except Exception:
                logger.exception("Failed to %s", action)
                return error_response(f"Failed to {action}", 500)

        return wrapper

    return decorator
