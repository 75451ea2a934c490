"""Submit order form use case"""

import logging

from ...domain.entities.order_form import OrderForm
from ...domain.errors import DomainError, ErrorKind
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.order_dtos import OrderFormCreateDTO, OrderFormResponseDTO


logger = logging.getLogger(__name__)


class CreateOrderFormUseCase:
    """Use case for submitting a new order form.

    Open to anonymous callers. The referenced product must exist; its
    availability flag is not checked. New forms always start PENDING.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: OrderFormCreateDTO) -> OrderFormResponseDTO:
        product_id = request.resolved_product_id
        async with self.unit_of_work:
            product = await self.unit_of_work.products.get_by_id(product_id)
            if not product:
                logger.warning("Order form rejected, product not found, productId: %s", product_id)
                raise DomainError.product_not_found(product_id)

            try:
                order = OrderForm.submit(
                    product=product,
                    quantity=request.quantity,
                    contact_name=request.contact_name,
                    contact_phone=request.contact_phone,
                    contact_email=request.contact_email,
                    requirements=request.requirements,
                )
            except ValueError as e:
                raise DomainError(ErrorKind.VALIDATION, str(e))

            order = await self.unit_of_work.orders.add(order)
            await self.unit_of_work.commit()

        logger.info(
            "Order form submitted, orderId: %s, productId: %s, quantity: %s",
            order.id, product_id, order.quantity,
        )
        return OrderFormResponseDTO.from_entity(order)
