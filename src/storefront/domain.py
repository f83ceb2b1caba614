"""Storefront domain: composition root for identity, catalogue and ordering.

A single Protean domain holds every aggregate so that an order, its line
items and the product references they point at live in one relational store
and can be written inside one unit of work.

Providers (database, broker, event store) come from ``domain.toml`` next to
this module. ``PROTEAN_ENV`` selects an overlay from that file.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
