"""Self-service password change use case"""

import logging

from ...core.security import get_password_hash, verify_password
from ...domain.errors import DomainError, ErrorKind
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import ChangePasswordDto


logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Use case for changing the caller's own password"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, username: str, request: ChangePasswordDto) -> None:
        async with self.unit_of_work:
            users = self.unit_of_work.users
            user = await users.get_by_username(username)
            if not user:
                raise DomainError.not_found("User", username)

            if not verify_password(request.current_password, user.hashed_password):
                logger.warning("Password change rejected, wrong current password: %s", username)
                raise DomainError(ErrorKind.INVALID_CREDENTIALS, "Current password is incorrect")

            user.apply_patch(hashed_password=get_password_hash(request.new_password))
            await users.update(user)
            await self.unit_of_work.commit()

        logger.info("Password changed, username: %s", username)
