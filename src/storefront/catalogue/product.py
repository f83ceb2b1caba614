"""Product aggregate: an entry in the storefront catalog."""

from protean.fields import Float, String

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A product offered for sale.

    ``price`` is the current catalog price. Orders snapshot the price they
    were placed at, so changing it here never rewrites order history.
    """

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    image: String(max_length=1024)
