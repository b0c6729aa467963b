"""Database models."""
from catalog.models.product import Product
from catalog.models.user import User

__all__ = ["Product", "User"]
