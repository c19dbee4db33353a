"""Cross-module exception bases and the DRF error envelope.

Domain modules subclass ``NotFoundError`` / ``PersistenceError`` so the
API layer can map whole families of failures to a status code.

``standard_exception_handler`` is registered as DRF's
``EXCEPTION_HANDLER`` and rewrites framework errors into::

    {"type": "validation_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class NotFoundError(Exception):
    """A referenced entity does not exist."""


class PersistenceError(Exception):
    """Writing an entity to the database failed."""


def standard_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        error_type = "validation_error"
    elif response.status_code >= 500:
        error_type = "server_error"
    else:
        error_type = "client_error"

    response.data = {
        "type": error_type,
        "errors": _flatten_errors(exc.detail if isinstance(exc, exceptions.APIException) else str(exc)),
    }
    logger.warning(
        "api.error",
        type=error_type,
        status_code=response.status_code,
        view=context["view"].__class__.__name__ if context.get("view") else None,
    )
    return response


def _flatten_errors(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            nested = key if attr is None else f"{attr}.{key}"
            errors.extend(_flatten_errors(value, None if key == "non_field_errors" else nested))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten_errors(item, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]
