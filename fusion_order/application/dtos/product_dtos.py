"""Product DTOs"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from .common_dtos import CamelModel, optional_text, trimmed
from ...domain.entities.product import Product
from ...domain.value_objects.price import Price


class ProductCreateDto(CamelModel):
    name: trimmed(1, 100)
    category: trimmed(1, 50)
    price: Decimal = Field(..., gt=0)
    description: Optional[str] = None
    image_url: optional_text(255) = None
    available: Optional[bool] = None

    @field_validator("price")
    @classmethod
    def two_decimal_places(cls, value: Decimal) -> Decimal:
        # Rounds to cents; a price that rounds to 0.00 is rejected
        return Price(value).amount


class ProductUpdateDto(CamelModel):
    """Partial product update; omitted or null fields are left unchanged"""
    name: Optional[trimmed(1, 100)] = None
    category: Optional[trimmed(1, 50)] = None
    price: Optional[Decimal] = Field(default=None, gt=0)
    description: Optional[str] = None
    image_url: optional_text(255) = None
    available: Optional[bool] = None

    @field_validator("price")
    @classmethod
    def two_decimal_places(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        return None if value is None else Price(value).amount


class ProductDto(CamelModel):
    id: int
    name: str
    category: str
    price: Decimal
    description: Optional[str] = None
    image_url: Optional[str] = None
    available: bool
    created_at: Optional[datetime] = None

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDto":
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            price=product.price.amount,
            description=product.description,
            image_url=product.image_url,
            available=product.available,
            created_at=product.created_at,
        )
