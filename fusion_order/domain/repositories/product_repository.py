"""Product repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.product import Product


class IProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        pass

    @abstractmethod
    async def list_available(self) -> List[Product]:
        pass

    @abstractmethod
    async def list_by_category(self, category: str) -> List[Product]:
        pass

    @abstractmethod
    async def search_by_name(self, keyword: str) -> List[Product]:
        """Case-insensitive substring match on name"""
        pass

    @abstractmethod
    async def add(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        pass
