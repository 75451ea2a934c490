"""Register user use case"""

import logging

from ...domain.entities.user import User
from ...domain.errors import DomainError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import CreateUserDto, UserDto
from ...core.security import get_password_hash


logger = logging.getLogger(__name__)


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateUserDto) -> UserDto:
        logger.info("Registering user, username: %s", request.username)
        async with self.unit_of_work:
            users = self.unit_of_work.users

            if await users.exists_by_username(request.username):
                logger.warning("Registration rejected, username taken: %s", request.username)
                raise DomainError.duplicate_username()

            if request.email is not None and await users.exists_by_email(request.email):
                logger.warning("Registration rejected, email taken: %s", request.email)
                raise DomainError.duplicate_email()

            user = User.create(
                username=request.username,
                hashed_password=get_password_hash(request.password),
                email=request.email,
                phone=request.phone,
                role=request.role,
            )

            user = await users.add(user)
            await self.unit_of_work.commit()

        logger.info("User registered, userId: %s, username: %s", user.id, user.username)
        return UserDto.from_entity(user)
