"""Shared BDD fixtures and step definitions for ordering."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.catalogue.product import Product
from storefront.ordering.order import Order, OrderItem


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalog():
    """Product name to stored Product."""
    return {}


@pytest.fixture()
def cart():
    return []


@pytest.fixture()
def outcome():
    """Container for the placed order or the captured error."""
    return {"order": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalog has "{name}" at {price:f}'))
def _(catalog, name, price):
    product = Product(name=name, price=price)
    current_domain.repository_for(Product).add(product)
    catalog[name] = product


@given("an empty cart")
def _(cart):
    cart.clear()


@given(parsers.cfparse('a cart with {quantity:d} "{name}" at {price:f}'))
@given(parsers.cfparse('the cart has {quantity:d} "{name}" at {price:f}'))
def _(cart, catalog, quantity, name, price):
    product = catalog.get(name)
    product_id = product.id if product else f"missing-{name.lower().replace(' ', '-')}"
    cart.append({"id": product_id, "price": price, "quantity": quantity})


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("no orders or items are stored")
def _():
    assert current_domain.repository_for(Order)._dao.query.all().total == 0
    assert current_domain.repository_for(OrderItem)._dao.query.all().total == 0
