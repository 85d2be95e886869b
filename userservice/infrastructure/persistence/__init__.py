"""Persistence layer: SQLAlchemy engine, models and repositories."""

from userservice.infrastructure.persistence.base import BaseModel, BaseMutableModel
from userservice.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
