"""Product entity"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..value_objects.price import Price


@dataclass
class Product:
    name: str
    category: str
    price: Price
    description: Optional[str] = None
    image_url: Optional[str] = None
    available: bool = True
    id: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        category: str,
        price: Decimal,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        available: Optional[bool] = None,
    ) -> 'Product':
        return cls(
            name=name,
            category=category,
            price=Price(price),
            description=description,
            image_url=image_url,
            available=True if available is None else available,
        )

    def apply_patch(
        self,
        name: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[Decimal] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        available: Optional[bool] = None,
    ) -> None:
        """Overwrite every field that is not None; leave the rest alone."""
        if name is not None:
            self.name = name
        if category is not None:
            self.category = category
        if price is not None:
            self.price = Price(price)
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if available is not None:
            self.available = available
