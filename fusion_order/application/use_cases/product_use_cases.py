"""Product catalog use cases"""

import logging
from typing import List, Optional

from ...domain.entities.product import Product
from ...domain.errors import DomainError, ErrorKind
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.product_dtos import ProductCreateDto, ProductUpdateDto, ProductDto


logger = logging.getLogger(__name__)


class CreateProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: ProductCreateDto) -> ProductDto:
        try:
            product = Product.create(
                name=request.name,
                category=request.category,
                price=request.price,
                description=request.description,
                image_url=request.image_url,
                available=request.available,
            )
        except ValueError as e:
            raise DomainError(ErrorKind.VALIDATION, str(e))

        async with self.unit_of_work:
            product = await self.unit_of_work.products.add(product)
            await self.unit_of_work.commit()

        logger.info("Product created, productId: %s, name: %s", product.id, product.name)
        return ProductDto.from_entity(product)


class ListProductsUseCase:
    """List products with at most one filter applied.

    Precedence when several filters are given: keyword, then category,
    then ``available=True``. ``available=False`` means no filter.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        keyword: Optional[str] = None,
        category: Optional[str] = None,
        available: Optional[bool] = None,
    ) -> List[ProductDto]:
        async with self.unit_of_work:
            products = self.unit_of_work.products
            if keyword:
                result = await products.search_by_name(keyword)
            elif category:
                result = await products.list_by_category(category)
            elif available:
                result = await products.list_available()
            else:
                result = await products.list_all()

        logger.debug(
            "Listed %d products, keyword: %s, category: %s, available: %s",
            len(result), keyword, category, available,
        )
        return [ProductDto.from_entity(product) for product in result]


class GetProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, product_id: int) -> ProductDto:
        async with self.unit_of_work:
            product = await self.unit_of_work.products.get_by_id(product_id)
        if not product:
            raise DomainError.not_found("Product", product_id)
        return ProductDto.from_entity(product)


class UpdateProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, product_id: int, request: ProductUpdateDto) -> ProductDto:
        async with self.unit_of_work:
            products = self.unit_of_work.products
            product = await products.get_by_id(product_id)
            if not product:
                logger.warning("Update failed, product not found, productId: %s", product_id)
                raise DomainError.not_found("Product", product_id)

            try:
                product.apply_patch(
                    name=request.name,
                    category=request.category,
                    price=request.price,
                    description=request.description,
                    image_url=request.image_url,
                    available=request.available,
                )
            except ValueError as e:
                raise DomainError(ErrorKind.VALIDATION, str(e))

            product = await products.update(product)
            await self.unit_of_work.commit()

        logger.info("Product updated, productId: %s", product_id)
        return ProductDto.from_entity(product)


class DeleteProductUseCase:
    """Delete a product that no order form references"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, product_id: int) -> None:
        async with self.unit_of_work:
            if not await self.unit_of_work.products.get_by_id(product_id):
                raise DomainError.not_found("Product", product_id)

            order_count = await self.unit_of_work.orders.count_by_product(product_id)
            if order_count:
                logger.warning(
                    "Delete refused, productId: %s still has %d order form(s)", product_id, order_count
                )
                raise DomainError.product_in_use(product_id, order_count)

            await self.unit_of_work.products.delete(product_id)
            await self.unit_of_work.commit()

        logger.info("Product deleted, productId: %s", product_id)
