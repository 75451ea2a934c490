"""User repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.user import User


class IUserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Remove the user; False when there was nothing to remove"""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str, exclude_id: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        pass
