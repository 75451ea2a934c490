"""Self-service routes for the authenticated caller"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_principal, get_unit_of_work
from ...api.middleware import Principal
from ...application.dtos.common_dtos import ApiResponse
from ...application.dtos.user_dtos import ChangePasswordDto, UserDto
from ...application.use_cases.change_password_use_case import ChangePasswordUseCase
from ...application.use_cases.get_user_profile import GetUserProfileUseCase
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/me", response_model=ApiResponse[UserDto])
async def get_current_user_profile(
    principal: Principal = Depends(get_current_principal),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Get current user profile"""
    use_case = GetUserProfileUseCase(unit_of_work)
    return ApiResponse.success(await use_case.execute(principal.username))


@router.put("/me/password", response_model=ApiResponse[None])
async def change_password(
    request: ChangePasswordDto,
    principal: Principal = Depends(get_current_principal),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Change current user's password"""
    use_case = ChangePasswordUseCase(unit_of_work)
    await use_case.execute(principal.username, request)
    return ApiResponse.success(message="Password changed")
