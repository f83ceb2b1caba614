"""Storefront database management CLI.

Usage:
    python -m storefront.manage setup-db        # Create all tables
    python -m storefront.manage drop-db         # Drop all tables
    python -m storefront.manage seed-products   # Fill an empty catalog

Pick the store with PROTEAN_ENV (e.g. ``PROTEAN_ENV=production``).
"""

import argparse
import sys


def _initialized_domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _initialized_domain()
    print(f"Creating {domain.name} database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _initialized_domain()
    print(f"Dropping {domain.name} database schema...")
    drop_db(domain)
    print("Done.")


def seed_products():
    from storefront.catalogue.seeding import seed_catalogue

    domain = _initialized_domain()
    with domain.domain_context():
        inserted = seed_catalogue(source="cli")
    if inserted:
        print(f"Seeded {inserted} products.")
    else:
        print("Catalog already seeded.")


_COMMANDS = {
    "setup-db": setup_database,
    "drop-db": drop_database,
    "seed-products": seed_products,
}


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-products", help="Insert the demo catalog if it is empty")

    args = parser.parse_args()

    command = _COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)
    command()


if __name__ == "__main__":
    main()
