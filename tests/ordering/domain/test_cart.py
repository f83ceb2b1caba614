from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from storefront.ordering.cart import (
    MAX_AMOUNT,
    CartLine,
    cart_total,
    lines_from_json,
    lines_to_json,
    parse_cart,
    to_money,
)


class TestToMoney:
    @pytest.mark.parametrize(
        "value, expected",
        [(25.99, "25.99"), ("79.99", "79.99"), (3, "3"), (Decimal("0.10"), "0.10"), (" 1.5 ", "1.5")],
        ids=["float", "string", "int", "decimal", "padded_string"],
    )
    def test_exact_amounts(self, value, expected):
        assert to_money(value) == Decimal(expected)

    @pytest.mark.parametrize("value", [None, True, "abc", "NaN", float("inf")])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(ValueError):
            to_money(value)


class TestParseCart:
    def test_lines_keep_submission_order(self):
        lines = parse_cart(
            [
                {"id": "p-1", "price": 25.99, "quantity": 2},
                {"id": "p-2", "price": "79.99", "quantity": 1},
            ]
        )

        assert lines == [
            CartLine(product_id="p-1", unit_price=Decimal("25.99"), quantity=2),
            CartLine(product_id="p-2", unit_price=Decimal("79.99"), quantity=1),
        ]

    def test_accepts_long_form_keys(self):
        (line,) = parse_cart([{"product_id": "p-1", "unit_price": 5, "quantity": "3"}])

        assert line == CartLine(product_id="p-1", unit_price=Decimal("5.00"), quantity=3)

    def test_duplicate_products_stay_separate_lines(self):
        lines = parse_cart([{"id": "p-1", "price": 1, "quantity": 1}, {"id": "p-1", "price": 1, "quantity": 2}])

        assert [line.quantity for line in lines] == [1, 2]

    def test_prices_are_rounded_to_cents(self):
        (line,) = parse_cart([{"id": "p-1", "price": "10.005", "quantity": 1}])

        assert line.unit_price == Decimal("10.01")

    @pytest.mark.parametrize("cart", [[], None])
    def test_empty_cart(self, cart):
        with pytest.raises(ValidationError) as exc:
            parse_cart(cart)

        assert exc.value.messages == {"cart": ["Cart is empty."]}

    @pytest.mark.parametrize(
        "cart",
        [{"id": "p-1", "price": 1, "quantity": 1}, "abc", 7],
        ids=["object", "string", "number"],
    )
    def test_cart_must_be_a_list(self, cart):
        with pytest.raises(ValidationError) as exc:
            parse_cart(cart)

        assert exc.value.messages == {"cart": ["Cart must be a list of items."]}

    @pytest.mark.parametrize(
        "entry, message",
        [
            ({"price": 1, "quantity": 1}, "Item 1: product id is required"),
            ({"id": "p-1", "quantity": 1}, "Item 1: price is required"),
            ({"id": "p-1", "price": "cheap", "quantity": 1}, "Item 1: price must be a decimal amount"),
            ({"id": "p-1", "price": -1, "quantity": 1}, "Item 1: price must not be negative"),
            ({"id": "p-1", "price": 1}, "Item 1: quantity is required"),
            ({"id": "p-1", "price": 1, "quantity": 0}, "Item 1: quantity must be at least 1"),
            ({"id": "p-1", "price": 1, "quantity": 1.5}, "Item 1: quantity must be a whole number"),
            ({"id": "p-1", "price": "1e30", "quantity": 1}, "Item 1: price must not exceed 99999999.99"),
            ({"id": "p-1", "price": 1, "quantity": 2**31}, "Item 1: quantity must not exceed 2147483647"),
            ("p-1", "Item 1: must be an object with id, price and quantity"),
            (7, "Item 1: must be an object with id, price and quantity"),
        ],
        ids=[
            "missing_id",
            "missing_price",
            "bad_price",
            "negative_price",
            "missing_quantity",
            "zero_quantity",
            "fractional_quantity",
            "huge_price",
            "huge_quantity",
            "string_line",
            "number_line",
        ],
    )
    def test_invalid_lines(self, entry, message):
        with pytest.raises(ValidationError) as exc:
            parse_cart([entry])

        assert exc.value.messages == {"cart": [message]}

    def test_every_bad_line_is_reported(self):
        with pytest.raises(ValidationError) as exc:
            parse_cart(
                [
                    {"id": "p-1", "price": 1, "quantity": 0},
                    {"id": "p-2", "price": 1, "quantity": 1},
                    {"id": "p-3", "price": -2, "quantity": 1},
                ]
            )

        assert exc.value.messages["cart"] == [
            "Item 1: quantity must be at least 1",
            "Item 3: price must not be negative",
        ]


class TestCartTotal:
    def test_total_is_exact(self):
        lines = parse_cart(
            [
                {"id": "p-1", "price": 25.99, "quantity": 2},
                {"id": "p-2", "price": 79.99, "quantity": 1},
            ]
        )

        assert cart_total(lines) == Decimal("131.97")

    def test_float_noise_does_not_leak_into_the_total(self):
        lines = parse_cart([{"id": "p-1", "price": 0.1, "quantity": 1}, {"id": "p-2", "price": 0.2, "quantity": 1}])

        assert cart_total(lines) == Decimal("0.30")

    def test_json_round_trip_keeps_lines(self):
        lines = parse_cart([{"id": "p-1", "price": 25.99, "quantity": 2}])

        assert lines_from_json(lines_to_json(lines)) == lines


class TestCartLimits:
    def test_price_at_the_column_limit_is_accepted(self):
        (line,) = parse_cart([{"id": "p-1", "price": "99999999.99", "quantity": 1}])

        assert line.unit_price == MAX_AMOUNT

    def test_total_above_the_column_limit_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_cart([{"id": "p-1", "price": "99999999.99", "quantity": 2}])

        assert exc.value.messages == {"cart": ["Order total must not exceed 99999999.99"]}

    def test_huge_price_and_huge_quantity_are_both_reported(self):
        with pytest.raises(ValidationError) as exc:
            parse_cart([{"id": "p-1", "price": "1e30", "quantity": 10**40}])

        assert exc.value.messages["cart"] == [
            "Item 1: price must not exceed 99999999.99",
            "Item 1: quantity must not exceed 2147483647",
        ]
