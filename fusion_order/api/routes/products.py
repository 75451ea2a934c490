"""Product catalog routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...api.dependencies import EntityId, get_unit_of_work, require_catalog_manager
from ...application.dtos.common_dtos import ApiResponse
from ...application.dtos.product_dtos import ProductCreateDto, ProductDto, ProductUpdateDto
from ...application.use_cases.product_use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[List[ProductDto]])
async def list_products(
    available: Optional[bool] = Query(None),
    category: Optional[str] = Query(None),
    keyword: Optional[str] = Query(None),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """List products, optionally filtered by keyword, category or availability"""
    use_case = ListProductsUseCase(unit_of_work)
    products = await use_case.execute(keyword=keyword, category=category, available=available)
    return ApiResponse.success(products)


@router.get("/{product_id}", response_model=ApiResponse[ProductDto])
async def get_product(product_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return ApiResponse.success(await GetProductUseCase(unit_of_work).execute(product_id))


@router.post("", response_model=ApiResponse[ProductDto], dependencies=[Depends(require_catalog_manager)])
async def create_product(
    request: ProductCreateDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Create product (admin or manager)"""
    product = await CreateProductUseCase(unit_of_work).execute(request)
    return ApiResponse.success(product, message="Product created")


@router.put("/{product_id}", response_model=ApiResponse[ProductDto], dependencies=[Depends(require_catalog_manager)])
async def update_product(
    product_id: EntityId,
    request: ProductUpdateDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Update product (admin or manager)"""
    product = await UpdateProductUseCase(unit_of_work).execute(product_id, request)
    return ApiResponse.success(product, message="Product updated")


@router.delete("/{product_id}", response_model=ApiResponse[None], dependencies=[Depends(require_catalog_manager)])
async def delete_product(product_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Delete product (admin or manager)"""
    await DeleteProductUseCase(unit_of_work).execute(product_id)
    return ApiResponse.success(message="Product deleted")
