"""User entity with business logic"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import UserRole


@dataclass
class User:
    username: str
    hashed_password: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole = UserRole.USER
    enabled: bool = True
    id: Optional[int] = None

    # Set by the store
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        username: str,
        hashed_password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> 'User':
        """Factory method to create a new user with proper defaults"""
        return cls(
            username=username,
            hashed_password=hashed_password,
            email=email,
            phone=phone,
            role=role or UserRole.USER,
            enabled=True,
        )

    def apply_patch(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        role: Optional[UserRole] = None,
        enabled: Optional[bool] = None,
        hashed_password: Optional[str] = None,
    ) -> None:
        """Overwrite every field that is not None; leave the rest alone.

        Uniqueness and hashing are the caller's job.
        """
        if username is not None:
            self.username = username
        if email is not None:
            self.email = email
        if phone is not None:
            self.phone = phone
        if role is not None:
            self.role = role
        if enabled is not None:
            self.enabled = enabled
        if hashed_password is not None:
            self.hashed_password = hashed_password

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
