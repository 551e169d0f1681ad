# server/core/products.py

import math
import logging
from sqlalchemy.orm import Session

from core.errors import NotFoundError, ValidationError
from models.product import Product


logger = logging.getLogger(__name__)


def _check_fields(name, category, price):
    missing = [
        field for field, value in (("name", name), ("category", category), ("price", price))
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    if not isinstance(price, (int, float)) or not math.isfinite(price):
        raise ValidationError("Price must be a finite number")


def create_product(db: Session, name: str | None, category: str | None,
                   price: float | None, img: str | None = "") -> Product:
    _check_fields(name, category, price)

    product = Product(name=name, category=category, price=price, img=img or "")
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Product %s created in category %s", product.id, product.category)
    return product


def get_product(db: Session, product_id: str) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def list_products(db: Session) -> list[Product]:
    return db.query(Product).all()


def list_products_by_category(db: Session, category_id: str) -> list[Product]:
    # exact match only, products of subcategories are not included
    return db.query(Product).filter(Product.category == category_id).all()


def update_product(db: Session, product_id: str, name: str | None, category: str | None,
                   price: float | None, img: str | None = "") -> Product:
    """
    Replaces all four fields of a product.
    An edit without a new image clears the stored path instead of keeping it.
    """
    product = get_product(db, product_id)
    _check_fields(name, category, price)

    product.name = name
    product.category = category
    product.price = price
    product.img = img or ""
    db.commit()
    db.refresh(product)
    logger.info("Product %s updated", product.id)
    return product


def delete_product(db: Session, product_id: str) -> None:
    product = get_product(db, product_id)
    db.delete(product)
    db.commit()
    logger.info("Product %s deleted", product_id)
