"""Repository for the Product aggregate."""

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    def listing(self) -> list[Product]:
        """Every product, alphabetically."""
        products = fetch_all(self._dao.query)
        return sorted(products, key=lambda product: (product.name, str(product.id)))

    def with_ids(self, product_ids) -> dict[str, Product]:
        """Products for the given ids, keyed by id. Unknown ids are simply absent."""
        ids = sorted({str(product_id) for product_id in product_ids})
        if not ids:
            return {}
        products = self._dao.query.filter(id__in=ids).limit(len(ids)).all().items
        return {str(product.id): product for product in products}

    def count(self) -> int:
        return self._dao.query.all().total
