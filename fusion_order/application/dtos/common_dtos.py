"""Shared DTO building blocks and the response envelope"""

from datetime import datetime
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, StringConstraints
from pydantic.alias_generators import to_camel


T = TypeVar("T")

EMAIL_MAX_LENGTH = 100

# Largest values the id and Integer columns can bind
MAX_ID = 2**63 - 1
MAX_INT = 2**31 - 1


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def blank_to_none(value):
    """Optional text fields treat "" as absent"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def email_length(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"must be at most {EMAIL_MAX_LENGTH} characters")
    return value


def trimmed(min_length: int = 1, max_length: Optional[int] = None):
    """Required text, surrounding whitespace stripped before length checks"""
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)]


def optional_text(max_length: Optional[int] = None):
    """Optional text where a blank value counts as absent"""
    return Annotated[
        Optional[Annotated[str, StringConstraints(max_length=max_length)]],
        BeforeValidator(blank_to_none),
    ]


OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(blank_to_none), AfterValidator(email_length)]


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every response body"""

    code: int
    message: str
    data: Optional[T] = None
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def success(cls, data: Optional[T] = None, message: str = "success") -> "ApiResponse[T]":
        return cls(code=200, message=message, data=data)

    @classmethod
    def error(cls, code: int, message: str) -> "ApiResponse[T]":
        return cls(code=code, message=message, data=None)
