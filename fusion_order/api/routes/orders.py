"""Order form routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...api.dependencies import EntityId, get_unit_of_work, require_admin
from ...application.dtos.common_dtos import MAX_ID, ApiResponse
from ...application.dtos.order_dtos import OrderFormCreateDTO, OrderFormResponseDTO
from ...application.use_cases.create_order import CreateOrderFormUseCase
from ...application.use_cases.order_use_cases import (
    DeleteOrderFormUseCase,
    GetOrderFormUseCase,
    ListOrderFormsUseCase,
    UpdateOrderStatusUseCase,
)
from ...domain.enums import OrderStatus
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.post("", response_model=ApiResponse[OrderFormResponseDTO])
async def submit_order_form(
    order_data: OrderFormCreateDTO,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Submit an order form (no account needed)"""
    order = await CreateOrderFormUseCase(unit_of_work).execute(order_data)
    return ApiResponse.success(order, message="Order form submitted")


@router.get("", response_model=ApiResponse[List[OrderFormResponseDTO]])
async def list_order_forms(
    product_id: Optional[int] = Query(None, alias="productId", le=MAX_ID),
    status: Optional[OrderStatus] = Query(None),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """List order forms by product, by status, or all"""
    use_case = ListOrderFormsUseCase(unit_of_work)
    return ApiResponse.success(await use_case.execute(product_id=product_id, status=status))


@router.get("/{order_id}", response_model=ApiResponse[OrderFormResponseDTO])
async def get_order_form(order_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return ApiResponse.success(await GetOrderFormUseCase(unit_of_work).execute(order_id))


@router.put("/{order_id}/status", response_model=ApiResponse[OrderFormResponseDTO], dependencies=[Depends(require_admin)])
async def update_order_status(
    order_id: EntityId,
    status: OrderStatus = Query(...),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Change an order form's status (admin only)"""
    order = await UpdateOrderStatusUseCase(unit_of_work).execute(order_id, status)
    return ApiResponse.success(order, message="Order status updated")


@router.delete("/{order_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
async def delete_order_form(order_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Delete an order form (admin only)"""
    await DeleteOrderFormUseCase(unit_of_work).execute(order_id)
    return ApiResponse.success(message="Order form deleted")
