"""Order form management use cases"""

import logging
from typing import List, Optional

from ...domain.enums import OrderStatus
from ...domain.errors import DomainError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.order_dtos import OrderFormResponseDTO


logger = logging.getLogger(__name__)


class ListOrderFormsUseCase:
    """List order forms; ``product_id`` wins over ``status`` when both are given"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        product_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> List[OrderFormResponseDTO]:
        async with self.unit_of_work:
            orders = self.unit_of_work.orders
            if product_id is not None:
                result = await orders.list_by_product(product_id)
            elif status is not None:
                result = await orders.list_by_status(status)
            else:
                result = await orders.list_all()
        return [OrderFormResponseDTO.from_entity(order) for order in result]


class GetOrderFormUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, order_id: int) -> OrderFormResponseDTO:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(order_id)
        if not order:
            raise DomainError.not_found("Order form", order_id)
        return OrderFormResponseDTO.from_entity(order)


class UpdateOrderStatusUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, order_id: int, status: OrderStatus) -> OrderFormResponseDTO:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(order_id)
            if not order:
                logger.warning("Status change failed, order form not found, orderId: %s", order_id)
                raise DomainError.not_found("Order form", order_id)

            previous = order.change_status(status)
            order = await self.unit_of_work.orders.update(order)
            await self.unit_of_work.commit()

        logger.info("Order form %s status changed: %s -> %s", order_id, previous.value, status.value)
        return OrderFormResponseDTO.from_entity(order)


class DeleteOrderFormUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, order_id: int) -> None:
        async with self.unit_of_work:
            if not await self.unit_of_work.orders.delete(order_id):
                raise DomainError.not_found("Order form", order_id)
            await self.unit_of_work.commit()
        logger.info("Order form deleted, orderId: %s", order_id)
