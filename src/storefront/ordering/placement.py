"""Order placement: the checkout transaction.

``place_order`` validates the cart, then dispatches ``PlaceOrder``. Its
handler runs inside a Protean ``UnitOfWork`` (opened by ``@handle``): the
Order and every OrderItem are added to the same unit of work, which commits
only when the handler returns and rolls back on any exception.

A product id that does not resolve to a stored Product is treated like a
foreign-key violation: the unit of work is abandoned and nothing is written.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.ordering.cart import lines_from_json, lines_to_json, parse_cart, to_money
from storefront.ordering.order import Order, OrderItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderCreationFailed(Exception):
    """Storage work for an order failed and was rolled back.

    The underlying error is chained as ``__cause__``. Nothing is retried; the
    caller resubmits the whole cart if it wants to try again.
    """


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, unit_price, quantity}


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = lines_from_json(command.items)
        products = current_domain.repository_for(Product).with_ids(line.product_id for line in lines)

        order_repo = current_domain.repository_for(Order)
        order, items = Order.place(
            user_id=command.user_id,
            lines=lines,
            sequence=order_repo.next_sequence(command.user_id),
        )
        order_repo.add(order)

        item_repo = current_domain.repository_for(OrderItem)
        for line, item in zip(lines, items):
            product = products.get(line.product_id)
            if product is None:
                raise ObjectNotFoundError({"_entity": f"Product {line.product_id} does not exist"})
            _warn_on_price_drift(order, line, product)
            item_repo.add(item)

        return str(order.id)


def _warn_on_price_drift(order, line, product):
    catalogue_price = to_money(product.price)
    if catalogue_price != line.unit_price:
        logger.warning(
            "order.price_drift",
            order_id=str(order.id),
            product_id=line.product_id,
            submitted_price=str(line.unit_price),
            catalogue_price=str(catalogue_price),
        )


def place_order(user_id, cart_items) -> Order:
    """Persist an order for ``user_id`` from a client cart.

    The cart is validated before any storage work; an empty or malformed cart
    raises ``ValidationError``. Storage failures surface as
    ``OrderCreationFailed`` after the rollback.
    """
    lines = parse_cart(cart_items)
    command = PlaceOrder(user_id=str(user_id), items=lines_to_json(lines))

    try:
        order_id = current_domain.process(command, asynchronous=False)
    except ValidationError:
        raise
    except Exception as exc:
        logger.error("order.placement_failed", user_id=str(user_id), lines=len(lines), cause=str(exc))
        raise OrderCreationFailed("Order creation failed") from exc

    order = current_domain.repository_for(Order).get(order_id)
    logger.info("order.placed", order_id=order_id, user_id=str(user_id), total=order.total, lines=len(lines))
    return order
