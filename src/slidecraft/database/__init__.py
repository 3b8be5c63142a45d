"""
Database package
"""

from .database import (
    async_engine, AsyncSessionLocal, init_db,
    create_engine_for, create_session_factory, to_async_url
)
from .models import Base, User, Project
from .repositories import UserRepository, ProjectRepository

__all__ = [
    "async_engine",
    "AsyncSessionLocal",
    "init_db",
    "create_engine_for",
    "create_session_factory",
    "to_async_url",
    "Base",
    "User",
    "Project",
    "UserRepository",
    "ProjectRepository",
]
