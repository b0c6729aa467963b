"""Seed the catalog database with sample products."""
import random
import sys
from decimal import Decimal

from sqlalchemy.orm import Session

from catalog.database import Base, SessionLocal, engine
from catalog.services import product_store


def seed_products(db: Session, num_rows: int) -> int:
    """
    Insert products with random names and prices.

    Args:
        db: Database session
        num_rows: Number of products to create

    Returns:
        Number of products created
    """
    categories = [
        "Electronics",
        "Clothing",
        "Home & Garden",
        "Sports",
        "Books",
        "Toys",
    ]

    adjectives = [
        "Premium",
        "Deluxe",
        "Standard",
        "Compact",
        "Portable",
        "Wireless",
    ]

    products = [
        "Widget",
        "Gadget",
        "Tool",
        "Kit",
        "Accessory",
    ]

    for i in range(num_rows):
        category = random.choice(categories)
        adjective = random.choice(adjectives)
        product = random.choice(products)

        fields = {
            "name": f"{adjective} {category} {product}",
            "price": Decimal(random.randint(100, 99999)) / 100,
        }
        # Leave some descriptions empty
        if i % 3:
            fields["description"] = (
                f"High-quality {adjective.lower()} {product.lower()} designed for {category.lower()}."
            )

        product_store.create_product(db, fields)

    return num_rows


def main():
    """Main function to parse arguments and seed products."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.seed_products <num_rows>")
        print("Example: python -m scripts.seed_products 25")
        sys.exit(1)

    num_rows = int(sys.argv[1])

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = seed_products(db, num_rows)
    finally:
        db.close()

    print(f"Seeded {created:,} products")


if __name__ == "__main__":
    main()
