"""Unit tests for the Product request rule set."""

from __future__ import annotations

import pytest

from modules.core.validation import check
from modules.products.constants import (
    AVAILABILITY_INVALID,
    INVALID_ID,
    NAME_REQUIRED,
    PRICE_NOT_NUMBER,
    PRICE_NOT_POSITIVE,
    PRICE_REQUIRED,
)
from modules.products.rules import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    REPLACE_PRODUCT_RULES,
)

pytestmark = pytest.mark.unit


def _messages(errors):
    return [error.msg for error in errors]


class TestProductIdRules:
    def test_valid_id(self):
        assert check(PRODUCT_ID_RULES, params={"id": "12"}) == []

    def test_invalid_id_yields_exactly_one_error(self):
        errors = check(PRODUCT_ID_RULES, params={"id": "not-valid-url"})
        assert _messages(errors) == [INVALID_ID]
        assert errors[0].location == "params"


class TestCreateRules:
    def test_empty_body(self):
        errors = check(CREATE_PRODUCT_RULES, body={})
        assert _messages(errors) == [
            NAME_REQUIRED,
            PRICE_NOT_NUMBER,
            PRICE_REQUIRED,
            PRICE_NOT_POSITIVE,
        ]

    def test_text_price_yields_two_errors(self):
        errors = check(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": "hola"})
        assert _messages(errors) == [PRICE_NOT_NUMBER, PRICE_NOT_POSITIVE]

    @pytest.mark.parametrize("price", [0, -100, "0", "-0.01"])
    def test_non_positive_price(self, price):
        errors = check(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": price})
        assert _messages(errors) == [PRICE_NOT_POSITIVE]

    def test_valid_body(self):
        assert check(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": 300}) == []


class TestReplaceRules:
    def test_empty_body_with_valid_id(self):
        errors = check(REPLACE_PRODUCT_RULES, params={"id": "1"}, body={})
        assert len(errors) == 5
        assert errors[-1].msg == AVAILABILITY_INVALID

    def test_empty_body_with_invalid_id(self):
        errors = check(REPLACE_PRODUCT_RULES, params={"id": "x"}, body={})
        assert len(errors) == 6
        assert errors[0].msg == INVALID_ID

    def test_valid_body(self):
        body = {"name": "Monitor", "price": 100, "availability": True}
        assert check(REPLACE_PRODUCT_RULES, params={"id": "1"}, body=body) == []
