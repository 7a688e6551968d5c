"""DRF exception handler.

Framework-level failures (malformed JSON, unsupported method or media
type) are rendered in the same ``{"errors": [{"msg": ...}]}`` envelope
the validation layer uses, so every 4xx from the API has one shape.
"""

from __future__ import annotations

from typing import Any, List

import structlog
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def _messages(detail: Any) -> List[str]:
    if isinstance(detail, dict):
        return [message for value in detail.values() for message in _messages(value)]
    if isinstance(detail, (list, tuple)):
        return [message for value in detail for message in _messages(value)]
    return [str(detail)]


def api_exception_handler(exc: Exception, context: dict):
    response = exception_handler(exc, context)
    if response is None:
        return None

    logger.warning(
        "request.rejected",
        status_code=response.status_code,
        error=exc.__class__.__name__,
    )
    response.data = {
        "errors": [{"type": "request", "msg": message} for message in _messages(response.data)]
    }
    return response
