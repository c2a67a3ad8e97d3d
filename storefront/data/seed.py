# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"id": 1, "name": "Keyboard", "price": Decimal("199.99")},
    {"id": 2, "name": "Mouse", "price": Decimal("49.50")},
    {"id": 3, "name": "Monitor", "price": Decimal("899.00")},
]


def seed_products(db: Session) -> int:
    repo = ProductRepo(db)
    # not forcing: only seed if empty
    if repo.has_products():
        return 0
    for data in PRODUCTS:
        repo.add_product(ProductModel(**data))
    db.commit()
    logger.info(f"Seeded {len(PRODUCTS)} products")
    return len(PRODUCTS)

