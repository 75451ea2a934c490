"""User repository implementation"""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User
from ...domain.enums import UserRole
from ...domain.errors import DomainError
from ..orm.user_model import UserModel


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        model = self.session.get(UserModel, user_id)
        return self._map_to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        model = self.session.query(UserModel).filter(UserModel.username == username).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        model = self.session.query(UserModel).filter(UserModel.email == email).first()
        return self._map_to_entity(model) if model else None

    async def list_all(self) -> List[User]:
        """All users in insertion order"""
        models = self.session.query(UserModel).order_by(UserModel.id).all()
        return [self._map_to_entity(model) for model in models]

    async def exists_by_username(self, username: str, exclude_id: Optional[int] = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.username == username)
        if exclude_id is not None:
            query = query.filter(UserModel.id != exclude_id)
        return query.first() is not None

    async def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.email == email)
        if exclude_id is not None:
            query = query.filter(UserModel.id != exclude_id)
        return query.first() is not None

    async def add(self, user: User) -> User:
        """Add a new user"""
        model = UserModel(
            username=user.username,
            hashed_password=user.hashed_password,
            email=user.email,
            phone=user.phone,
            role=user.role,
            enabled=user.enabled,
        )
        self.session.add(model)
        self._flush()
        self.session.refresh(model)
        return self._map_to_entity(model)

    async def update(self, user: User) -> User:
        """Update an existing user"""
        model = self.session.get(UserModel, user.id)
        if model is None:
            raise DomainError.not_found("User", user.id)
        self._update_model_from_entity(model, user)
        self._flush()
        self.session.refresh(model)
        return self._map_to_entity(model)

    async def delete(self, user_id: int) -> bool:
        """Delete user"""
        model = self.session.get(UserModel, user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _flush(self) -> None:
        """Flush, turning unique index violations into domain errors"""
        try:
            self.session.flush()
        except IntegrityError as e:
            detail = str(e.orig).lower()
            if "email" in detail:
                raise DomainError.duplicate_email() from e
            if "username" in detail:
                raise DomainError.duplicate_username() from e
            raise

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        """Update ORM model from domain entity"""
        model.username = user.username
        model.hashed_password = user.hashed_password
        model.email = user.email
        model.phone = user.phone
        model.role = user.role
        model.enabled = user.enabled

    def _map_to_entity(self, model: UserModel) -> User:
        """Map ORM model to domain entity"""
        return User(
            id=model.id,
            username=model.username,
            hashed_password=model.hashed_password,
            email=model.email,
            phone=model.phone,
            role=UserRole(model.role),
            enabled=model.enabled,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
