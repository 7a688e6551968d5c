"""Request rule set of the Product endpoints."""

from __future__ import annotations

from modules.core.validation import as_number, body, param
from modules.products.constants import (
    AVAILABILITY_INVALID,
    INVALID_ID,
    NAME_REQUIRED,
    PRICE_NOT_NUMBER,
    PRICE_NOT_POSITIVE,
    PRICE_REQUIRED,
)

product_id = param("id").is_int(INVALID_ID)

name = body("name").not_empty(NAME_REQUIRED)

price = (
    body("price")
    .is_numeric(PRICE_NOT_NUMBER)
    .not_empty(PRICE_REQUIRED)
    .custom(lambda value: as_number(value) > 0, PRICE_NOT_POSITIVE)
)

availability = body("availability").is_boolean(AVAILABILITY_INVALID)

PRODUCT_ID_RULES = (product_id,)
CREATE_PRODUCT_RULES = (name, price)
REPLACE_PRODUCT_RULES = (product_id, name, price, availability)
