"""Flask glue shared by the controllers: auth guard and error boundary."""
from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, request, session

from ..core.app_logger import get_logger
from ..core.exceptions import AuthenticationError, ValidationError

logger = get_logger(__name__)


def current_uid() -> Optional[str]:
    return session.get("uid")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_uid():
            return jsonify({"success": False, "message": "Please sign in first"}), 401
        return view(*args, **kwargs)

    return wrapper


def api_action(failure_message: str):
    """Turn domain errors into JSON replies; nothing is retried automatically."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except AuthenticationError as e:
                return jsonify({"success": False, "message": str(e)}), 401
            except Exception:
                logger.exception("%s failed", view.__name__)
                return jsonify({"success": False, "message": failure_message}), 500

        return wrapper

    return decorator


def payload() -> dict:
    """Request body as a dict, JSON or form-encoded."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
