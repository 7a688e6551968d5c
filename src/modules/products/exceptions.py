"""Product domain exceptions.

Raised by the Service Layer; the API layer (Views) catches them and
translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product exists with the requested id."""
