"""Order form DTOs for API requests and responses"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from .common_dtos import MAX_INT, CamelModel, OptionalEmail, trimmed
from ...domain.entities.order_form import OrderForm
from ...domain.enums import OrderStatus


class ProductRefDto(CamelModel):
    id: int = Field(..., le=MAX_INT)


class OrderFormCreateDTO(CamelModel):
    """Request DTO for submitting an order form.

    The product may be given as ``productId`` or as ``product: {"id": ...}``.
    Anything else sent inside ``product`` is ignored; the stored product is
    always looked up by id.
    """
    product_id: Optional[int] = Field(default=None, le=MAX_INT)
    product: Optional[ProductRefDto] = None
    quantity: int = Field(..., ge=1, le=MAX_INT)
    contact_name: trimmed(1, 50)
    contact_phone: trimmed(1, 20)
    contact_email: OptionalEmail = None
    requirements: Optional[str] = None

    @model_validator(mode="after")
    def product_reference_required(self) -> "OrderFormCreateDTO":
        if self.product_id is None and self.product is None:
            raise ValueError("product is required")
        return self

    @property
    def resolved_product_id(self) -> int:
        return self.product_id if self.product_id is not None else self.product.id


class OrderFormResponseDTO(CamelModel):
    """Response DTO for order form data"""
    id: int
    product_id: int
    product_name: str
    quantity: int
    contact_name: str
    contact_phone: str
    contact_email: Optional[str] = None
    requirements: Optional[str] = None
    status: OrderStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, order: OrderForm) -> "OrderFormResponseDTO":
        """Convert domain entity to DTO"""
        return cls(
            id=order.id,
            product_id=order.product.id,
            product_name=order.product.name,
            quantity=order.quantity,
            contact_name=order.contact_name,
            contact_phone=order.contact_phone,
            contact_email=order.contact_email,
            requirements=order.requirements,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
