"""Persistence operations for products."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from catalog.exceptions import ProductNotFound
from catalog.models.product import Product

logger = logging.getLogger(__name__)

# Largest value a 64-bit INTEGER primary key can hold
MAX_PRODUCT_ID = 2**63 - 1


def _parse_id(product_id: Union[int, str]) -> Optional[int]:
    """Return the id as an int if it could name a stored row, else None."""
    if isinstance(product_id, str) and not product_id.isdigit():
        return None
    try:
        value = int(product_id)
    except (TypeError, ValueError):
        return None
    if not 1 <= value <= MAX_PRODUCT_ID:
        return None
    return value


def list_products(db: Session) -> List[Product]:
    """Return every product, most recently created first."""
    return db.query(Product).order_by(Product.created_at.desc(), Product.id.desc()).all()


def get_product(db: Session, product_id: Union[int, str]) -> Product:
    """
    Look up a product by id.

    Ids that are not positive integers within the key range cannot match a
    row and are reported as not found without querying.

    Raises:
        ProductNotFound: If no row has that id
    """
    value = _parse_id(product_id)
    if value is None:
        raise ProductNotFound(product_id)

    product = db.query(Product).filter(Product.id == value).first()
    if not product:
        raise ProductNotFound(product_id)
    return product


def create_product(db: Session, fields: Dict[str, Any]) -> Product:
    """
    Insert a product from validated fields.

    Args:
        db: Database session
        fields: Validated name, price and optional description

    Returns:
        The persisted product with id and timestamps populated
    """
    product = Product(**{key: fields[key] for key in Product.fillable if key in fields})
    db.add(product)
    db.commit()
    db.refresh(product)

    logger.info(f"Created product {product.id}: name='{product.name}'")
    return product


def update_product(db: Session, product_id: Union[int, str], fields: Dict[str, Any]) -> Product:
    """
    Overwrite the supplied fields of a product.

    Fields not present in ``fields`` keep their stored values.

    Raises:
        ProductNotFound: If no row has that id
    """
    product = get_product(db, product_id)

    for key in Product.fillable:
        if key in fields:
            setattr(product, key, fields[key])

    # Touch even when the submitted values equal the stored ones
    product.updated_at = datetime.now(timezone.utc).replace(tzinfo=None)

    db.commit()
    db.refresh(product)

    logger.info(f"Updated product {product.id}: fields={sorted(fields)}")
    return product


def delete_product(db: Session, product_id: Union[int, str]) -> None:
    """
    Permanently remove a product.

    Raises:
        ProductNotFound: If no row has that id
    """
    product = get_product(db, product_id)

    db.delete(product)
    db.commit()

    logger.info(f"Deleted product {product_id}")
