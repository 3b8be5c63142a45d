"""
SQLAlchemy database models for SlideCraft
"""

import time
import uuid
from typing import Dict, Any, List, Optional

from sqlalchemy import Integer, String, Float, Boolean, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship, declarative_base

Base = declarative_base()


class User(Base):
    """User known by the identifier of the external auth provider"""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    external_id: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[float] = mapped_column(Float, default=time.time)

    projects: Mapped[List["Project"]] = relationship("Project", back_populates="user")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "external_id": self.external_id,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at,
        }


class Project(Base):
    """Presentation project: outline points plus generated slides"""
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    project_id: Mapped[str] = mapped_column(
        String(36), unique=True, index=True, default=lambda: str(uuid.uuid4())
    )
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    outlines: Mapped[List[str]] = mapped_column(JSON, default=lambda: [])
    slides: Mapped[Optional[List[Dict[str, Any]]]] = mapped_column(JSON, nullable=True)
    theme_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[float] = mapped_column(Float, default=time.time)
    updated_at: Mapped[float] = mapped_column(Float, default=time.time, onupdate=time.time)

    user: Mapped["User"] = relationship("User", back_populates="projects")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "title": self.title,
            "outlines": list(self.outlines or []),
            "slides": self.slides,
            "theme_name": self.theme_name,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
