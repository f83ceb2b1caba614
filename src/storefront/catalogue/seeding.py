"""Demo catalog seeding: command and handler.

Seeding only happens into an empty catalog, so running it on every start is
harmless.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SEED_PRODUCTS = [
    {"name": "Wireless Mouse", "price": 25.99, "image": "https://placehold.co/400x400/3498db/ffffff?text=Mouse"},
    {
        "name": "Mechanical Keyboard",
        "price": 79.99,
        "image": "https://placehold.co/400x400/2ecc71/ffffff?text=Keyboard",
    },
    {"name": "4K Monitor", "price": 349.99, "image": "https://placehold.co/400x400/9b59b6/ffffff?text=Monitor"},
    {
        "name": "Webcam with Ring Light",
        "price": 59.99,
        "image": "https://placehold.co/400x400/f1c40f/ffffff?text=Webcam",
    },
    {"name": "USB-C Hub", "price": 39.99, "image": "https://placehold.co/400x400/e74c3c/ffffff?text=Hub"},
    {
        "name": "Noise Cancelling Headphones",
        "price": 199.99,
        "image": "https://placehold.co/400x400/1abc9c/ffffff?text=Headphones",
    },
]


@storefront.command(part_of="Product")
class SeedCatalogue:
    """Populate an empty catalog with the demo products."""

    source: String(max_length=50, default="manual")


@storefront.command_handler(part_of=Product)
class SeedCatalogueHandler:
    @handle(SeedCatalogue)
    def seed_catalogue(self, command):
        repo = current_domain.repository_for(Product)

        if repo.count() > 0:
            logger.info("catalogue.already_seeded", source=command.source)
            return 0

        for data in SEED_PRODUCTS:
            repo.add(Product(**data))

        logger.info("catalogue.seeded", count=len(SEED_PRODUCTS), source=command.source)
        return len(SEED_PRODUCTS)


def seed_catalogue(source: str = "manual") -> int:
    """Seed the catalog through the domain. Returns how many products were added."""
    return current_domain.process(SeedCatalogue(source=source), asynchronous=False)
