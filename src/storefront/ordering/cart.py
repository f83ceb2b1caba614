"""Cart lines and money arithmetic for checkout.

A cart arrives from the client as a list of ``{id, price, quantity}`` mappings.
It is validated here, before anything touches storage, and turned into
``CartLine`` values whose prices are exact decimals.
"""

import json
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENTS = Decimal("0.01")

# Column limits: prices and totals are DECIMAL(10, 2), quantities INTEGER.
MAX_AMOUNT = Decimal("99999999.99")
MAX_QUANTITY = 2_147_483_647

_PRODUCT_KEYS = ("id", "product_id")
_PRICE_KEYS = ("price", "unit_price")


def to_money(value) -> Decimal:
    """Exact decimal for a monetary value given as str, int, float or Decimal.

    Floats go through their shortest repr, so ``25.99`` becomes
    ``Decimal("25.99")`` and not the binary expansion.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, float):
        value = repr(value)
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    return amount


def quantize(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CartLine:
    """One product, the price the shopper saw, and how many they want."""

    product_id: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        return cls(
            product_id=str(data["product_id"]),
            unit_price=to_money(data["unit_price"]),
            quantity=int(data["quantity"]),
        )


def _first_present(entry: dict, keys):
    for key in keys:
        if key in entry and entry[key] is not None:
            return entry[key]
    return None


def _parse_quantity(raw) -> int:
    if isinstance(raw, bool):
        raise ValueError
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw.strip())
    raise ValueError


def _parse_line(position: int, entry) -> tuple[CartLine | None, list[str]]:
    if not isinstance(entry, dict):
        return None, [f"Item {position}: must be an object with id, price and quantity"]

    errors = []

    product_id = _first_present(entry, _PRODUCT_KEYS)
    if product_id is None or str(product_id).strip() == "":
        errors.append(f"Item {position}: product id is required")

    raw_price = _first_present(entry, _PRICE_KEYS)
    price = None
    if raw_price is None:
        errors.append(f"Item {position}: price is required")
    else:
        try:
            price = to_money(raw_price)
        except ValueError:
            errors.append(f"Item {position}: price must be a decimal amount")
        else:
            if price < 0:
                errors.append(f"Item {position}: price must not be negative")
            elif price > MAX_AMOUNT:
                errors.append(f"Item {position}: price must not exceed {MAX_AMOUNT}")

    raw_quantity = entry.get("quantity")
    quantity = None
    if raw_quantity is None:
        errors.append(f"Item {position}: quantity is required")
    else:
        try:
            quantity = _parse_quantity(raw_quantity)
        except ValueError:
            errors.append(f"Item {position}: quantity must be a whole number")
        else:
            if quantity < 1:
                errors.append(f"Item {position}: quantity must be at least 1")
            elif quantity > MAX_QUANTITY:
                errors.append(f"Item {position}: quantity must not exceed {MAX_QUANTITY}")

    if errors:
        return None, errors
    return CartLine(product_id=str(product_id).strip(), unit_price=quantize(price), quantity=quantity), []


def parse_cart(entries) -> list[CartLine]:
    """Validate a client cart and return its lines in submission order.

    Raises ``ValidationError`` for an empty cart or for any malformed line;
    every problem is reported, not just the first. Lines are never merged or
    dropped, so two entries for the same product stay two lines. Unit prices
    are rounded to cents here, so the order total is the exact sum of what
    gets stored on the line items, and the total never exceeds
    ``MAX_AMOUNT``.
    """
    if entries is None:
        raise ValidationError({"cart": ["Cart is empty."]})
    if not isinstance(entries, (list, tuple)):
        raise ValidationError({"cart": ["Cart must be a list of items."]})
    if not entries:
        raise ValidationError({"cart": ["Cart is empty."]})

    lines = []
    errors = []
    for position, entry in enumerate(entries, start=1):
        line, line_errors = _parse_line(position, entry)
        if line_errors:
            errors.extend(line_errors)
        else:
            lines.append(line)

    if errors:
        raise ValidationError({"cart": errors})
    if cart_total(lines) > MAX_AMOUNT:
        raise ValidationError({"cart": [f"Order total must not exceed {MAX_AMOUNT}"]})
    return lines


def cart_total(lines) -> Decimal:
    """Sum of price x quantity over the lines, rounded to cents."""
    return quantize(sum((line.line_total for line in lines), Decimal("0")))


def lines_to_json(lines) -> str:
    return json.dumps([line.to_dict() for line in lines])


def lines_from_json(payload: str) -> list[CartLine]:
    return [CartLine.from_dict(data) for data in json.loads(payload)]
