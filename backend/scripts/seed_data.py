"""
Populate the database with a sample catalog

Two suppliers, each with categories, products, gallery images and banners.
Gallery and banner rows point at placeholder paths on the public disk.

Usage:
    python scripts/seed_data.py
    python scripts/seed_data.py --reset
"""
import sys
import argparse
import logging
from pathlib import Path

# Add the backend directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_admin.database import SessionLocal, Base, engine, init_db
from catalog_admin.models import Supplier, ProductCategory, Product, ProductGallery, Banner

logger = logging.getLogger("seed_data")

CATALOG = [
    {
        "name": "AudioInfinite",
        "description": "Premium audio equipment and accessories supplier",
        "categories": {
            "Headphones": [
                ("Wireless Headphones Pro", "Over-ear headphones with active noise cancelling"),
                ("Gaming Headset RGB", "Closed-back gaming headset with detachable microphone"),
            ],
            "Speakers": [
                ("Bluetooth Speaker Mini", "Pocket-size waterproof speaker"),
            ],
        },
    },
    {
        "name": "TendZone",
        "description": "Outdoor and camping gear distributor",
        "categories": {
            "Tents": [
                ("Family Tent 6 Person", "Two-room tent with a covered porch"),
                ("Ultralight Tent Solo", "Single-wall tent under one kilogram"),
            ],
            "Backpacks": [
                ("Hiking Backpack 50L", "Ventilated back panel and rain cover"),
            ],
        },
    },
]

IMAGES_PER_PRODUCT = 3
BANNERS_PER_SUPPLIER = 2


def seed(db) -> None:
    for supplier_data in CATALOG:
        supplier = Supplier(name=supplier_data["name"], description=supplier_data["description"])
        db.add(supplier)
        db.flush()
        logger.info("Supplier %s (id=%s)", supplier.name, supplier.id)

        for position, (category_name, products) in enumerate(supplier_data["categories"].items()):
            category = ProductCategory(
                name=category_name,
                description=f"{category_name} from {supplier.name}",
                supplier_id=supplier.id,
                order=position
            )
            db.add(category)
            db.flush()

            for product_name, description in products:
                product = Product(
                    name=product_name,
                    description=description,
                    supplier_id=supplier.id,
                    category_id=category.id
                )
                db.add(product)
                db.flush()

                for order in range(1, IMAGES_PER_PRODUCT + 1):
                    db.add(ProductGallery(
                        product_id=product.id,
                        file_path="product-galleries/placeholder.jpg",
                        order=order
                    ))

        for order in range(1, BANNERS_PER_SUPPLIER + 1):
            db.add(Banner(
                title=f"{supplier.name} promotion {order}",
                description=f"Seasonal offer #{order}",
                image_path="banners/placeholder.jpg",
                supplier_id=supplier.id,
                is_active=order == 1,
                order=order
            ))

    db.commit()


def main():
    parser = argparse.ArgumentParser(description="Seed the catalog with sample data")
    parser.add_argument("--reset", action="store_true", help="Drop every table before seeding")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    if args.reset:
        logger.info("Dropping tables...")
        Base.metadata.drop_all(bind=engine)
    init_db()

    db = SessionLocal()
    try:
        if db.query(Supplier).count() and not args.reset:
            logger.warning("Suppliers already exist, use --reset to start over")
            return
        seed(db)
        logger.info("Seed finished")
    except Exception:
        db.rollback()
        logger.exception("Seed failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
