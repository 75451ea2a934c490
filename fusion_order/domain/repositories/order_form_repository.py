"""Order form repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.order_form import OrderForm
from ..enums import OrderStatus


class IOrderFormRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[OrderForm]:
        pass

    @abstractmethod
    async def list_all(self) -> List[OrderForm]:
        pass

    @abstractmethod
    async def list_by_product(self, product_id: int) -> List[OrderForm]:
        pass

    @abstractmethod
    async def list_by_status(self, status: OrderStatus) -> List[OrderForm]:
        pass

    @abstractmethod
    async def count_by_product(self, product_id: int) -> int:
        pass

    @abstractmethod
    async def add(self, order: OrderForm) -> OrderForm:
        pass

    @abstractmethod
    async def update(self, order: OrderForm) -> OrderForm:
        pass

    @abstractmethod
    async def delete(self, order_id: int) -> bool:
        pass
