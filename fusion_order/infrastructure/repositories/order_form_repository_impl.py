"""Order form repository implementation"""

from typing import Optional, List
from sqlalchemy.orm import Session

from ...domain.entities.order_form import OrderForm
from ...domain.repositories.order_form_repository import IOrderFormRepository
from ...domain.enums import OrderStatus
from ...domain.errors import DomainError
from ..orm.order_form_model import OrderFormModel
from .product_repository_impl import map_product


class OrderFormRepositoryImpl(IOrderFormRepository):
    """Repository implementation for OrderForm aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, order_id: int) -> Optional[OrderForm]:
        """Get order by ID"""
        model = self.session.get(OrderFormModel, order_id)
        return self._map_to_entity(model) if model else None

    async def list_all(self) -> List[OrderForm]:
        return self._list(self.session.query(OrderFormModel))

    async def list_by_product(self, product_id: int) -> List[OrderForm]:
        return self._list(self.session.query(OrderFormModel).filter(OrderFormModel.product_id == product_id))

    async def list_by_status(self, status: OrderStatus) -> List[OrderForm]:
        return self._list(self.session.query(OrderFormModel).filter(OrderFormModel.status == status))

    async def count_by_product(self, product_id: int) -> int:
        return self.session.query(OrderFormModel).filter(OrderFormModel.product_id == product_id).count()

    async def add(self, order: OrderForm) -> OrderForm:
        """Add a new order"""
        model = OrderFormModel(
            product_id=order.product.id,
            quantity=order.quantity,
            contact_name=order.contact_name,
            contact_phone=order.contact_phone,
            contact_email=order.contact_email,
            requirements=order.requirements,
            status=order.status,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._map_to_entity(model)

    async def update(self, order: OrderForm) -> OrderForm:
        """Update an existing order"""
        model = self.session.get(OrderFormModel, order.id)
        if model is None:
            raise DomainError.not_found("Order form", order.id)
        model.quantity = order.quantity
        model.contact_name = order.contact_name
        model.contact_phone = order.contact_phone
        model.contact_email = order.contact_email
        model.requirements = order.requirements
        model.status = order.status
        self.session.flush()
        self.session.refresh(model)
        return self._map_to_entity(model)

    async def delete(self, order_id: int) -> bool:
        model = self.session.get(OrderFormModel, order_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _list(self, query) -> List[OrderForm]:
        return [self._map_to_entity(model) for model in query.order_by(OrderFormModel.id).all()]

    def _map_to_entity(self, model: OrderFormModel) -> OrderForm:
        """Map ORM model to domain entity"""
        return OrderForm(
            id=model.id,
            product=map_product(model.product),
            quantity=model.quantity,
            contact_name=model.contact_name,
            contact_phone=model.contact_phone,
            contact_email=model.contact_email,
            requirements=model.requirements,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
