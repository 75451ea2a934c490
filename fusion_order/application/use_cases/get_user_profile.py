"""Get user profile use case"""

from ...domain.errors import DomainError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import UserDto


class GetUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, username: str) -> UserDto:
        """Get the profile of the authenticated caller"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(username)

        if not user:
            # Token outlived the account
            raise DomainError.not_found("User", username)

        return UserDto.from_entity(user)
