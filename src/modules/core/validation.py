"""Declarative request validation and input error normalisation.

A ``ValidationChain`` targets a single request field -- a URL parameter
(``param``) or a body key (``body``) -- and holds an ordered list of
checks.  Every check of a chain is evaluated, even after an earlier one
failed, so one field may contribute several errors (a non-numeric price
fails both the numeric check and the ``> 0`` check).

Checks look at values the way an untyped JSON client sends them:

- ``as_text`` renders any value as the text the string checks run against.
- ``as_number`` is the loose numeric coercion used by comparison checks.

``validate(*chains)`` wraps a view action: when any chain reports an
error the action is never called and the client receives
``400 {"errors": [...]}``.
"""

from __future__ import annotations

import functools
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

INT_PATTERN = re.compile(r"[-+]?[0-9]+")
NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
BOOLEAN_TEXTS = frozenset({"true", "false", "1", "0"})
# Magnitude from which numbers are written in exponent form (1e+21).
EXPONENT_THRESHOLD = 1e21

LOCATION_PARAMS = "params"
LOCATION_BODY = "body"

Predicate = Callable[[Any], bool]


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def as_text(value: Any) -> str:
    """Text form of ``value``; missing, null and structured values are ``""``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if abs(value) < EXPONENT_THRESHOLD:
            return str(value)
        value = as_number(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    return ""


def as_number(value: Any) -> float:
    """Loose numeric coercion; ``nan`` when ``value`` has no numeric reading."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldError:
    """One violated check."""

    msg: str
    path: str
    location: str
    value: Any = None

    def as_dict(self) -> dict:
        data = {"type": "field", "msg": self.msg, "path": self.path, "location": self.location}
        if self.value is not None:
            data["value"] = self.value
        return data


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


class ValidationChain:
    """Ordered checks for one request field."""

    def __init__(self, location: str, path: str) -> None:
        self.location = location
        self.path = path
        self._checks: List[Tuple[Predicate, str]] = []

    def __repr__(self) -> str:  # pragma: no cover
        return f"<ValidationChain {self.location}.{self.path} checks={len(self._checks)}>"

    def custom(self, predicate: Predicate, message: str) -> ValidationChain:
        """Append an arbitrary check; ``predicate`` receives the raw value."""
        self._checks.append((predicate, message))
        return self

    def is_int(self, message: str) -> ValidationChain:
        return self.custom(lambda v: INT_PATTERN.fullmatch(as_text(v)) is not None, message)

    def is_numeric(self, message: str) -> ValidationChain:
        return self.custom(lambda v: NUMERIC_PATTERN.fullmatch(as_text(v)) is not None, message)

    def is_boolean(self, message: str) -> ValidationChain:
        return self.custom(lambda v: as_text(v) in BOOLEAN_TEXTS, message)

    def not_empty(self, message: str) -> ValidationChain:
        return self.custom(lambda v: as_text(v) != "", message)

    def extract(self, params: Mapping[str, Any], body: Any) -> Any:
        if self.location == LOCATION_PARAMS:
            return params.get(self.path)
        if isinstance(body, Mapping):
            return body.get(self.path)
        return None

    def run(self, params: Mapping[str, Any], body: Any) -> List[FieldError]:
        value = self.extract(params, body)
        return [
            FieldError(msg=message, path=self.path, location=self.location, value=value)
            for predicate, message in self._checks
            if not predicate(value)
        ]


def param(name: str) -> ValidationChain:
    """Start a chain on a URL parameter."""
    return ValidationChain(LOCATION_PARAMS, name)


def body(name: str) -> ValidationChain:
    """Start a chain on a request body key."""
    return ValidationChain(LOCATION_BODY, name)


def check(
    chains: Iterable[ValidationChain],
    params: Optional[Mapping[str, Any]] = None,
    body: Any = None,
) -> List[FieldError]:
    """Run ``chains`` in declaration order and collect every error."""
    errors: List[FieldError] = []
    for chain in chains:
        errors.extend(chain.run(params or {}, body))
    return errors


# ---------------------------------------------------------------------------
# Normaliser
# ---------------------------------------------------------------------------


def errors_from_pydantic(exc: PydanticValidationError) -> List[FieldError]:
    """Translate DTO conversion failures into body field errors."""
    return [
        FieldError(
            msg=error["msg"],
            path=".".join(str(part) for part in error["loc"]),
            location=LOCATION_BODY,
        )
        for error in exc.errors()
    ]


def error_response(errors: Iterable[FieldError]) -> Response:
    return Response(
        {"errors": [error.as_dict() for error in errors]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def validate(*chains: ValidationChain):
    """Decorate a ViewSet action so it only runs on valid input.

    URL parameters come from the action's keyword arguments; the body is
    only parsed when a body chain is declared.
    """
    reads_body = any(chain.location == LOCATION_BODY for chain in chains)

    def decorator(action):
        @functools.wraps(action)
        def wrapper(view, request: Request, *args, **kwargs):
            payload = request.data if reads_body else None
            errors = check(chains, params=kwargs, body=payload)
            if errors:
                logger.info(
                    "request.validation_failed",
                    path=request.path,
                    error_count=len(errors),
                    fields=sorted({error.path for error in errors}),
                )
                return error_response(errors)
            return action(view, request, *args, **kwargs)

        return wrapper

    return decorator
