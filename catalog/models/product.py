"""Product model."""
from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from catalog.database import Base

# Fixed-point price: two decimal places, at most 99,999,999.99
PRICE_PRECISION = 10
PRICE_SCALE = 2


class Product(Base):
    """Product model for storing catalog entries."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Attributes that create/update may assign from request input
    fillable = ("name", "price", "description")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
