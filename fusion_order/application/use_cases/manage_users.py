"""Admin user management use cases"""

import logging
from typing import List

from ...domain.errors import DomainError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import UpdateUserDto, UserDto
from ...core.security import get_password_hash


logger = logging.getLogger(__name__)


class ListUsersUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self) -> List[UserDto]:
        async with self.unit_of_work:
            users = await self.unit_of_work.users.list_all()
        logger.info("Listed %d users", len(users))
        return [UserDto.from_entity(user) for user in users]


class GetUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: int) -> UserDto:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
        if not user:
            logger.warning("User not found, userId: %s", user_id)
            raise DomainError.not_found("User", user_id)
        return UserDto.from_entity(user)


class UpdateUserUseCase:
    """Merge a partial update onto a stored user.

    Username and email changes are checked against every other user.
    A non-empty password is re-hashed; empty or missing keeps the old one.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: int, request: UpdateUserDto) -> UserDto:
        logger.info("Updating user, userId: %s", user_id)
        async with self.unit_of_work:
            users = self.unit_of_work.users
            user = await users.get_by_id(user_id)
            if not user:
                logger.warning("Update failed, user not found, userId: %s", user_id)
                raise DomainError.not_found("User", user_id)

            if (
                request.username is not None
                and request.username != user.username
                and await users.exists_by_username(request.username, exclude_id=user_id)
            ):
                logger.warning("Update failed, username taken: %s", request.username)
                raise DomainError.duplicate_username()

            if (
                request.email is not None
                and request.email != user.email
                and await users.exists_by_email(request.email, exclude_id=user_id)
            ):
                logger.warning("Update failed, email taken: %s", request.email)
                raise DomainError.duplicate_email()

            user.apply_patch(
                username=request.username,
                email=request.email,
                phone=request.phone,
                role=request.role,
                enabled=request.enabled,
                hashed_password=get_password_hash(request.password) if request.password else None,
            )

            user = await users.update(user)
            await self.unit_of_work.commit()

        logger.info("User updated, userId: %s, username: %s", user_id, user.username)
        return UserDto.from_entity(user)


class DeleteUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: int) -> None:
        logger.info("Deleting user, userId: %s", user_id)
        async with self.unit_of_work:
            if not await self.unit_of_work.users.delete(user_id):
                logger.warning("Delete failed, user not found, userId: %s", user_id)
                raise DomainError.not_found("User", user_id)
            await self.unit_of_work.commit()
        logger.info("User deleted, userId: %s", user_id)
