"""User DTOs for API layer"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common_dtos import CamelModel, OptionalEmail, optional_text, trimmed
from ...domain.entities.user import User
from ...domain.enums import UserRole


PASSWORD_MIN_LENGTH = 6


class CreateUserDto(CamelModel):
    """DTO for user registration"""
    username: trimmed(3, 50)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    email: OptionalEmail = None
    phone: optional_text(20) = None
    role: Optional[UserRole] = None


class LoginUserDto(CamelModel):
    """DTO for user login"""
    username: trimmed()
    password: str = Field(..., min_length=1)


class UpdateUserDto(CamelModel):
    """Partial user update; omitted or null fields are left unchanged"""
    username: Optional[trimmed(3, 50)] = None
    password: Optional[str] = None
    email: OptionalEmail = None
    phone: Optional[trimmed(0, 20)] = None
    role: Optional[UserRole] = None
    enabled: Optional[bool] = None

    @field_validator("password")
    @classmethod
    def password_length(cls, value: Optional[str]) -> Optional[str]:
        # Empty means "keep the current password"
        if value and len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        return value


class ChangePasswordDto(CamelModel):
    """DTO for self-service password change"""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class UserDto(CamelModel):
    """DTO for user response"""
    id: int
    username: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    enabled: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            phone=user.phone,
            role=user.role,
            enabled=user.enabled,
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    """Login result"""
    token: str
    username: str
    role: UserRole
