"""Admin user management routes"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import EntityId, get_unit_of_work, require_admin
from ...application.dtos.common_dtos import ApiResponse
from ...application.dtos.user_dtos import UpdateUserDto, UserDto
from ...application.use_cases.manage_users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/users", response_model=ApiResponse[List[UserDto]])
async def list_users(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """List all users (admin only)"""
    return ApiResponse.success(await ListUsersUseCase(unit_of_work).execute())


@router.get("/users/{user_id}", response_model=ApiResponse[UserDto])
async def get_user(user_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Get user by ID (admin only)"""
    return ApiResponse.success(await GetUserUseCase(unit_of_work).execute(user_id))


@router.put("/users/{user_id}", response_model=ApiResponse[UserDto])
async def update_user(
    user_id: EntityId,
    request: UpdateUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Update user (admin only)"""
    user = await UpdateUserUseCase(unit_of_work).execute(user_id, request)
    return ApiResponse.success(user, message="User updated")


@router.delete("/users/{user_id}", response_model=ApiResponse[None])
async def delete_user(user_id: EntityId, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Delete user (admin only)"""
    await DeleteUserUseCase(unit_of_work).execute(user_id)
    return ApiResponse.success(message="User deleted")
