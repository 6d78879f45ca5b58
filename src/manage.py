"""Storefront management CLI.

Usage:
    python src/manage.py setup-db             # Create all tables
    python src/manage.py drop-db              # Drop all tables
    python src/manage.py seed --products 20   # Load a demo catalogue
"""

import argparse
import json
import random
import sys

from faker import Faker

SIZES = ["XS", "S", "M", "L", "XL"]
COLORS = ["Black", "White", "Navy", "Olive", "Sand"]
BRANDS = ["Tabako", "Northline", "Kalye", "Habi", "Lumen"]


def setup_database():
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping database schema...")
    drop_db(storefront)
    print("Done.")


def seed(product_count, seed_value=None):
    """Create products with sized/colored variants; opening stock goes through the ledger."""
    from protean.utils.globals import current_domain

    from storefront.catalogue.management import AddVariant, CreateProduct
    from storefront.domain import storefront

    fake = Faker()
    if seed_value is not None:
        Faker.seed(seed_value)
        random.seed(seed_value)

    storefront.init()
    with storefront.domain_context():
        for index in range(product_count):
            name = f"{fake.color_name()} {random.choice(['Tee', 'Shirt', 'Hoodie', 'Cap', 'Tote'])}"
            slug = f"{fake.slug(name)}-{index}"
            product_id = current_domain.process(
                CreateProduct(
                    name=name,
                    slug=slug,
                    brand=random.choice(BRANDS),
                    description=fake.paragraph(nb_sentences=3),
                    is_featured=index < 4,
                    image_urls=json.dumps([f"https://picsum.photos/seed/{slug}/800/800"]),
                ),
                asynchronous=False,
            )

            price = float(random.randrange(399, 2999, 50))
            color = random.choice(COLORS)
            for position, size in enumerate(random.sample(SIZES, k=3)):
                current_domain.process(
                    AddVariant(
                        product_id=product_id,
                        name=f"{size} / {color}",
                        sku=f"{slug[:20].upper()}-{size}-{color[:3].upper()}",
                        price=price,
                        initial_inventory=random.randint(0, 40),
                        size=size,
                        color=color,
                        is_default=position == 0,
                        added_by="seed",
                    ),
                    asynchronous=False,
                )
            print(f"  {name} ({slug})")

    print(f"Seeded {product_count} products.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load a demo catalogue")
    seed_parser.add_argument("--products", type=int, default=20, help="Number of products to create")
    seed_parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(args.products, args.seed)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
