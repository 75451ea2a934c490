"""API dependencies"""

from typing import Annotated, Optional

from fastapi import Depends, Path, Request
from sqlalchemy.orm import Session

from ..application.dtos.common_dtos import MAX_ID
from ..core.security import TokenService
from ..db.database import get_db
from ..domain.enums import UserRole
from ..domain.errors import DomainError
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from .middleware import Principal


# Path ids beyond the id column range are rejected as bad input
EntityId = Annotated[int, Path(le=MAX_ID)]


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_principal(request: Request) -> Optional[Principal]:
    """Identity set by the gate, or None"""
    return getattr(request.state, "principal", None)


async def get_current_principal(principal: Optional[Principal] = Depends(get_principal)) -> Principal:
    """Any authenticated caller"""
    if principal is None:
        raise DomainError.authentication_failed()
    return principal


def require_roles(*roles: UserRole):
    """Dependency factory: the caller must hold one of ``roles``"""
    allowed = frozenset(roles)

    async def guard(principal: Optional[Principal] = Depends(get_principal)) -> Principal:
        if principal is None or principal.role not in allowed:
            raise DomainError.access_denied()
        return principal

    return guard


require_admin = require_roles(UserRole.ADMIN)
require_catalog_manager = require_roles(UserRole.ADMIN, UserRole.MANAGER)
