#!/usr/bin/env python3
"""Seed product catalog script.

Loads the showroom's sample inventory into the product store.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from showroom.domain.entities import Product, Review
from showroom.infrastructure.config import settings
from showroom.infrastructure.database import create_tables, dispose_engine
from showroom.infrastructure.product_store import ProductStore, get_product_store

SEEDED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)

SAMPLE_PRODUCTS = [
    Product(
        id=1,
        name="Italian Carrara White",
        category="marble",
        price=12.50,
        stock="In Stock",
        description=(
            "Classic white marble with soft grey veins, sourced directly from the "
            "Carrara mountains. Perfect for luxury flooring and kitchen countertops."
        ),
        origin="Carrara, Italy",
        finish="High Gloss Polish",
        images=[
            "https://images.unsplash.com/photo-1618221639263-381d62aa55d7?q=80&w=800",
            "https://images.unsplash.com/photo-1599695681064-9475c255f283?q=80&w=600",
            "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?q=80&w=600",
        ],
        reviews=[
            Review(user="Sarah J.", rating=5, text="Absolutely beautiful stone.", date=SEEDED_AT),
        ],
    ),
    Product(
        id=2,
        name="Black Galaxy Granite",
        category="granite",
        price=18.00,
        stock="In Stock",
        description=(
            "Deep black granite with natural golden specks that resemble a starry "
            "night sky. Extremely durable and scratch-resistant."
        ),
        origin="Andhra Pradesh, India",
        finish="Mirror Polish",
        images=[
            "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?q=80&w=800",
            "https://images.unsplash.com/photo-1628003758836-84d3b64c015b?q=80&w=600",
            "https://images.unsplash.com/photo-1550989460-0adf9ea622e2?q=80&w=600",
        ],
    ),
    Product(
        id=3,
        name="Spanish Beige Crema",
        category="marble",
        price=10.50,
        stock="Low Stock (120 sq.ft left)",
        description=(
            "Warm, creamy beige tones that bring a cozy feel to living rooms. "
            "Known for its uniform texture."
        ),
        origin="Alicante, Spain",
        finish="Satin / Honed",
        images=[
            "https://images.unsplash.com/photo-1604147495798-57beb5d6af73?q=80&w=800",
            "https://images.unsplash.com/photo-1616486338812-3dadae4b4f9d?q=80&w=600",
        ],
        reviews=[
            Review(user="Mike Ross", rating=4, text="Good quality, fast delivery.", date=SEEDED_AT),
        ],
    ),
    Product(
        id=4,
        name="Matte Grey Bathroom Tiles",
        category="tiles",
        price=4.50,
        stock="In Stock",
        description=(
            "Modern anti-skid ceramic tiles designed specifically for wet areas. "
            "Safety meets style."
        ),
        origin="Local Premium",
        finish="Matte / Anti-Skid",
        images=[
            "https://images.unsplash.com/photo-1595428774223-ef52624120d2?q=80&w=800",
            "https://images.unsplash.com/photo-1584622650111-993a426fbf0a?q=80&w=600",
        ],
    ),
]


async def seed_catalog(store: ProductStore, clear: bool = True) -> dict:
    """Load the sample inventory into a store.

    Args:
        store: Target product store.
        clear: Whether to delete existing products first.

    Returns:
        Seeding result.
    """
    deleted = 0
    if clear:
        for product in await store.list_products():
            if await store.delete_product(product.id):
                deleted += 1

    created = 0
    for product in SAMPLE_PRODUCTS:
        if await store.find_by_numeric_id(product.id) is not None:
            continue
        await store.create_product(product)
        created += 1

    return {"deleted": deleted, "created": created}


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the showroom product catalog",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products before seeding",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Showroom Catalog Seeder")
    print("=" * 60)
    print(f"Backend: {settings.store_backend}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    if settings.store_backend == "sql":
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        result = await seed_catalog(get_product_store(), clear=not args.no_clear)
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise
    finally:
        if settings.store_backend == "sql":
            await dispose_engine()

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Created: {result['created']} products")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
