"""Authentication routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_token_service, get_unit_of_work
from ...application.dtos.common_dtos import ApiResponse
from ...application.dtos.user_dtos import AuthResponse, CreateUserDto, LoginUserDto, UserDto
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.register_user import RegisterUserUseCase
from ...core.security import TokenService
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.post("/register", response_model=ApiResponse[UserDto])
async def register_user(
    user_data: CreateUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Register a new user"""
    use_case = RegisterUserUseCase(unit_of_work)
    user = await use_case.execute(user_data)
    return ApiResponse.success(user, message="Registration successful")


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login_user(
    login_data: LoginUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """Login user"""
    use_case = LoginUserUseCase(unit_of_work, token_service)
    auth = await use_case.execute(login_data)
    return ApiResponse.success(auth, message="Login successful")
