"""Product schemas for form input and page props."""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StrictStr, StringConstraints, field_serializer

from catalog.models.product import PRICE_PRECISION, PRICE_SCALE

ProductName = Annotated[
    StrictStr, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class ProductForm(BaseModel):
    """Fields accepted when creating or updating a product."""

    name: ProductName = Field(..., description="Product name")
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=PRICE_PRECISION,
        decimal_places=PRICE_SCALE,
        description="Unit price, two decimal places at most",
    )
    description: Optional[StrictStr] = Field(None, description="Free-form description")


class ProductProps(BaseModel):
    """Product as handed to the client components."""

    id: int
    name: str
    price: Decimal
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
