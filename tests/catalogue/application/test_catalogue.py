"""Application tests for catalog queries and seeding."""

from protean import current_domain
from storefront.catalogue.product import Product
from storefront.catalogue.seeding import SEED_PRODUCTS, seed_catalogue
from storefront.utils import queries


def _add(name, price):
    product = Product(name=name, price=price)
    current_domain.repository_for(Product).add(product)
    return product


class TestProductRepository:
    def test_listing_is_alphabetical(self):
        _add("Webcam", 59.99)
        _add("Mouse", 25.99)
        _add("Keyboard", 79.99)

        names = [product.name for product in current_domain.repository_for(Product).listing()]

        assert names == ["Keyboard", "Mouse", "Webcam"]

    def test_listing_reads_every_page(self, monkeypatch):
        monkeypatch.setattr(queries, "PAGE_SIZE", 2)
        for name in ["Webcam", "Mouse", "Keyboard", "Hub", "Monitor"]:
            _add(name, 10.0)

        names = [product.name for product in current_domain.repository_for(Product).listing()]

        assert names == ["Hub", "Keyboard", "Monitor", "Mouse", "Webcam"]

    def test_listing_of_empty_catalogue(self):
        assert current_domain.repository_for(Product).listing() == []

    def test_with_ids_skips_unknown_ids(self):
        mouse = _add("Mouse", 25.99)
        _add("Keyboard", 79.99)

        found = current_domain.repository_for(Product).with_ids([mouse.id, "missing-id"])

        assert list(found) == [str(mouse.id)]
        assert found[str(mouse.id)].name == "Mouse"

    def test_with_no_ids(self):
        assert current_domain.repository_for(Product).with_ids([]) == {}


class TestSeedCatalogue:
    def test_seeds_an_empty_catalogue(self):
        inserted = seed_catalogue()

        assert inserted == len(SEED_PRODUCTS)
        assert current_domain.repository_for(Product).count() == len(SEED_PRODUCTS)

    def test_seeding_twice_adds_nothing(self):
        seed_catalogue()

        assert seed_catalogue() == 0
        assert current_domain.repository_for(Product).count() == len(SEED_PRODUCTS)

    def test_does_not_touch_a_populated_catalogue(self):
        _add("House Brand Cable", 4.99)

        assert seed_catalogue(source="startup") == 0
        assert current_domain.repository_for(Product).count() == 1
