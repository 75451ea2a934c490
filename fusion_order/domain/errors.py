"""Domain errors

Every failure a use case can report is a ``DomainError`` tagged with one
``ErrorKind``. The API layer maps kinds to HTTP status codes in one place
(``fusion_order.api.errors.status_for``).
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    DUPLICATE_USERNAME = "duplicate_username"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_DISABLED = "account_disabled"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_IN_USE = "product_in_use"
    AUTHENTICATION_FAILED = "authentication_failed"
    ACCESS_DENIED = "access_denied"
    UNEXPECTED = "unexpected"


class DomainError(Exception):

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"DomainError({self.kind.value!r}, {self.message!r})"

    @classmethod
    def not_found(cls, resource: str, resource_id) -> "DomainError":
        return cls(ErrorKind.NOT_FOUND, f"{resource} not found, id: {resource_id}")

    @classmethod
    def duplicate_username(cls) -> "DomainError":
        return cls(ErrorKind.DUPLICATE_USERNAME, "Username already exists")

    @classmethod
    def duplicate_email(cls) -> "DomainError":
        return cls(ErrorKind.DUPLICATE_EMAIL, "Email already exists")

    @classmethod
    def invalid_credentials(cls) -> "DomainError":
        # Same message for unknown user and wrong password
        return cls(ErrorKind.INVALID_CREDENTIALS, "Invalid username or password")

    @classmethod
    def account_disabled(cls) -> "DomainError":
        return cls(ErrorKind.ACCOUNT_DISABLED, "Account is disabled")

    @classmethod
    def product_not_found(cls, product_id) -> "DomainError":
        return cls(ErrorKind.PRODUCT_NOT_FOUND, f"Product not found, id: {product_id}")

    @classmethod
    def product_in_use(cls, product_id, order_count: int) -> "DomainError":
        return cls(
            ErrorKind.PRODUCT_IN_USE,
            f"Product {product_id} is referenced by {order_count} order form(s)",
        )

    @classmethod
    def authentication_failed(cls, reason: str = "Authentication required") -> "DomainError":
        return cls(ErrorKind.AUTHENTICATION_FAILED, reason)

    @classmethod
    def access_denied(cls, reason: str = "Insufficient permissions") -> "DomainError":
        return cls(ErrorKind.ACCESS_DENIED, reason)
