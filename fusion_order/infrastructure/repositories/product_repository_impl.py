"""Product repository implementation"""

from typing import Optional, List
from sqlalchemy.orm import Session

from ...domain.repositories.product_repository import IProductRepository
from ...domain.entities.product import Product
from ...domain.errors import DomainError
from ...domain.value_objects.price import Price
from ..orm.product_model import ProductModel


class ProductRepositoryImpl(IProductRepository):
    """Repository implementation for Product aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        model = self.session.get(ProductModel, product_id)
        return map_product(model) if model else None

    async def list_all(self) -> List[Product]:
        return self._list(self.session.query(ProductModel))

    async def list_available(self) -> List[Product]:
        return self._list(self.session.query(ProductModel).filter(ProductModel.available.is_(True)))

    async def list_by_category(self, category: str) -> List[Product]:
        return self._list(self.session.query(ProductModel).filter(ProductModel.category == category))

    async def search_by_name(self, keyword: str) -> List[Product]:
        return self._list(
            self.session.query(ProductModel).filter(ProductModel.name.icontains(keyword, autoescape=True))
        )

    async def add(self, product: Product) -> Product:
        model = ProductModel(
            name=product.name,
            category=product.category,
            price=product.price.amount,
            description=product.description,
            image_url=product.image_url,
            available=product.available,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return map_product(model)

    async def update(self, product: Product) -> Product:
        model = self.session.get(ProductModel, product.id)
        if model is None:
            raise DomainError.not_found("Product", product.id)
        model.name = product.name
        model.category = product.category
        model.price = product.price.amount
        model.description = product.description
        model.image_url = product.image_url
        model.available = product.available
        self.session.flush()
        self.session.refresh(model)
        return map_product(model)

    async def delete(self, product_id: int) -> bool:
        model = self.session.get(ProductModel, product_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _list(self, query) -> List[Product]:
        return [map_product(model) for model in query.order_by(ProductModel.id).all()]


def map_product(model: ProductModel) -> Product:
    """Map ORM model to domain entity"""
    return Product(
        id=model.id,
        name=model.name,
        category=model.category,
        price=Price(model.price),
        description=model.description,
        image_url=model.image_url,
        available=model.available,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
