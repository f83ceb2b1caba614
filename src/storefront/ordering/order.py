"""Order and OrderItem aggregates.

An Order and its OrderItems are separate records linked by explicit
foreign-key fields (``OrderItem.order_id``, ``OrderItem.product_id``,
``Order.user_id``). Nothing is loaded lazily; readers join them on purpose
in ``storefront.ordering.history``.

Both are written together by ``PlaceOrderHandler`` inside one unit of work
and are never modified afterwards.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront
from storefront.ordering.cart import cart_total
from storefront.ordering.events import OrderPlaced


@storefront.aggregate
class Order:
    """A completed checkout.

    ``total`` is fixed at placement time from the prices the shopper
    submitted; catalog price changes never touch it.
    """

    user_id = Identifier(required=True)
    sequence = Integer(required=True, min_value=1)  # per user, in placement order
    total = Float(required=True, min_value=0.0)
    created_at = DateTime(required=True)

    @classmethod
    def place(cls, user_id, lines, sequence=1):
        """Build an Order and one OrderItem per cart line.

        Returns ``(order, items)``; the caller persists both in the same unit
        of work. An order without lines is refused.
        """
        if not lines:
            raise ValidationError({"cart": ["Cart is empty."]})

        now = datetime.now(UTC)
        total = cart_total(lines)

        order = cls(user_id=user_id, sequence=sequence, total=float(total), created_at=now)

        items = [
            OrderItem(
                order_id=order.id,
                product_id=line.product_id,
                line_number=line_number,
                quantity=line.quantity,
                price=float(line.unit_price),
            )
            for line_number, line in enumerate(lines, start=1)
        ]

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total=float(total),
                item_count=len(items),
                items=json.dumps([line.to_dict() for line in lines]),
                placed_at=now,
            )
        )
        return order, items


@storefront.aggregate
class OrderItem:
    """A line of an order: which product, how many, and at what price.

    ``price`` is the unit price captured at purchase time, independent
    of later changes to ``Product.price``.
    """

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    line_number = Integer(required=True, min_value=1)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
