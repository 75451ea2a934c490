"""Order form entity"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .product import Product
from ..enums import OrderStatus


@dataclass
class OrderForm:
    product: Product
    quantity: int
    contact_name: str
    contact_phone: str
    contact_email: Optional[str] = None
    requirements: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    id: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def submit(
        cls,
        product: Product,
        quantity: int,
        contact_name: str,
        contact_phone: str,
        contact_email: Optional[str] = None,
        requirements: Optional[str] = None,
    ) -> 'OrderForm':
        """New order against a stored product; always starts PENDING"""
        if product.id is None:
            raise ValueError("Order forms can only reference stored products")
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        return cls(
            product=product,
            quantity=quantity,
            contact_name=contact_name,
            contact_phone=contact_phone,
            contact_email=contact_email,
            requirements=requirements,
            status=OrderStatus.PENDING,
        )

    def change_status(self, status: OrderStatus) -> OrderStatus:
        """Set the status unconditionally and return the previous one.

        Any status may follow any other; there is no transition table.
        """
        previous = self.status
        self.status = status
        return previous
