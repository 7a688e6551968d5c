"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer and the Service layer and are immutable
(``frozen=True``).

The request rule set has already accepted the raw values by the time a
DTO is built; the DTO converts them to their stored types (``"29.99"`` to
``29.99``, ``"false"`` to ``False``) and rejects what the store cannot
hold (non-finite prices, over-long names).

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for a full product update.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.core.validation import as_text


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=255)
    price: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> str:
        return as_text(v)


class ReplaceProductDTO(CreateProductDTO):
    """Immutable DTO for full product updates: every mutable field is required."""

    availability: bool
