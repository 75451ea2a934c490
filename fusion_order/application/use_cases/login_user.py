"""Login user use case"""

import logging

from ...domain.errors import DomainError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import LoginUserDto, AuthResponse
from ...core.security import TokenService, verify_password


logger = logging.getLogger(__name__)


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, token_service: TokenService):
        self.unit_of_work = unit_of_work
        self.token_service = token_service

    async def execute(self, request: LoginUserDto) -> AuthResponse:
        logger.info("Login attempt, username: %s", request.username)
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(request.username)

        # Unknown user and wrong password must be indistinguishable to the caller
        if not user:
            logger.warning("Login failed, unknown username: %s", request.username)
            raise DomainError.invalid_credentials()

        if not verify_password(request.password, user.hashed_password):
            logger.warning("Login failed, wrong password for username: %s", request.username)
            raise DomainError.invalid_credentials()

        if not user.enabled:
            logger.warning("Login failed, account disabled: %s", request.username)
            raise DomainError.account_disabled()

        token = self.token_service.issue(user.username, user.role.value)
        logger.info("Login succeeded, username: %s, role: %s", user.username, user.role.value)
        return AuthResponse(token=token, username=user.username, role=user.role)
