"""Order history: a user's orders with their lines and product summaries.

Three explicit queries, whatever the number of orders: the user's orders,
all of their items, and the products those items point at. Each is read to
the end, so an order is never listed with only part of its items.
"""

from dataclasses import dataclass
from datetime import datetime

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.ordering.order import Order, OrderItem


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    image: str | None = None


@dataclass(frozen=True)
class OrderLineView:
    id: str
    product_id: str
    quantity: int
    price: float
    product: ProductSummary | None = None


@dataclass(frozen=True)
class OrderView:
    id: str
    user_id: str
    total: float
    created_at: datetime
    items: tuple[OrderLineView, ...] = ()


def list_orders(user_id) -> list[OrderView]:
    """Orders owned by ``user_id``, newest first; empty when there are none.

    Items stay grouped under their order in line order. A product that has
    since disappeared from the catalog leaves ``product`` as None rather
    than hiding the line.
    """
    orders = current_domain.repository_for(Order).for_user(user_id)
    if not orders:
        return []

    items = current_domain.repository_for(OrderItem).for_orders(order.id for order in orders)
    products = current_domain.repository_for(Product).with_ids(item.product_id for item in items)

    lines_by_order: dict[str, list[OrderLineView]] = {str(order.id): [] for order in orders}
    for item in items:
        product = products.get(str(item.product_id))
        lines_by_order[str(item.order_id)].append(
            OrderLineView(
                id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                price=item.price,
                product=ProductSummary(id=str(product.id), name=product.name, image=product.image)
                if product
                else None,
            )
        )

    return [
        OrderView(
            id=str(order.id),
            user_id=str(order.user_id),
            total=order.total,
            created_at=order.created_at,
            items=tuple(lines_by_order[str(order.id)]),
        )
        for order in orders
    ]
