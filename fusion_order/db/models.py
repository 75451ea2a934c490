"""Declarative base shared by all ORM models"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# NOTE: Model classes live in infrastructure/orm/ so the domain layer never
# imports SQLAlchemy. Nothing is imported here to avoid circular imports.
