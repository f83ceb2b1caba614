"""Repositories for Order and OrderItem.

Each method is one explicit query, paged until exhausted. Joins between the
two happen in ``storefront.ordering.history``, never behind an attribute
access.
"""

from storefront.domain import storefront
from storefront.ordering.order import Order, OrderItem
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """A user's orders, newest first. Ownership is part of the query predicate.

        Orders sharing a timestamp keep the order they were placed in.
        """
        orders = fetch_all(self._dao.query.filter(user_id=str(user_id)))
        return sorted(orders, key=lambda order: (order.created_at, -order.sequence), reverse=True)

    def next_sequence(self, user_id) -> int:
        """Sequence number for the user's next order, starting at 1."""
        latest = self._dao.query.filter(user_id=str(user_id)).order_by("-sequence").limit(1).all().first
        return latest.sequence + 1 if latest else 1


@storefront.repository(part_of=OrderItem)
class OrderItemRepository:
    def for_orders(self, order_ids) -> list[OrderItem]:
        """Line items of all the given orders, grouped by order in line order."""
        ids = sorted({str(order_id) for order_id in order_ids})
        if not ids:
            return []
        items = fetch_all(self._dao.query.filter(order_id__in=ids))
        return sorted(items, key=lambda item: (str(item.order_id), item.line_number))
