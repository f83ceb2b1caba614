"""BDD tests for order placement."""

from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when
from storefront.ordering.history import list_orders
from storefront.ordering.order import OrderItem
from storefront.ordering.placement import OrderCreationFailed, place_order

scenarios("features/order_placement.feature")

SHOPPER_ID = "shopper-001"


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the shopper places the order")
def _(cart, outcome):
    try:
        outcome["order"] = place_order(SHOPPER_ID, cart)
    except (ValidationError, OrderCreationFailed) as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order total is {amount:f}"))
def _(outcome, amount):
    assert outcome["exc"] is None
    assert outcome["order"].total == amount


@then(parsers.cfparse("the order has {count:d} items"))
def _(outcome, count):
    assert len(current_domain.repository_for(OrderItem).for_orders([outcome["order"].id])) == count


@then(parsers.cfparse("the shopper's history shows {count:d} order"))
def _(count):
    assert len(list_orders(SHOPPER_ID)) == count


@then("the order is rejected as invalid")
def _(outcome):
    assert isinstance(outcome["exc"], ValidationError)


@then("the order fails and is rolled back")
def _(outcome):
    assert isinstance(outcome["exc"], OrderCreationFailed)
