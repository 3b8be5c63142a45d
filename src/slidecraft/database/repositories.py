"""
Repository classes for database operations
"""

import time
import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import User, Project

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_external_id(self, external_id: str) -> Optional[User]:
        stmt = select(User).where(User.external_id == external_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(
        self,
        external_id: str,
        email: Optional[str] = None,
        name: Optional[str] = None
    ) -> User:
        user = await self.get_by_external_id(external_id)
        if user:
            return user

        user = User(external_id=external_id, email=email, name=name)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        logger.info(f"Created user {external_id}")
        return user


class ProjectRepository:
    """Repository for Project operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project_data: Dict[str, Any]) -> Project:
        """Create a new project"""
        project = Project(**project_data)
        self.session.add(project)
        await self.session.commit()
        await self.session.refresh(project)
        return project

    async def get_active(self, project_id: str) -> Optional[Project]:
        """Get a project that has not been soft-deleted"""
        stmt = select(Project).where(
            Project.project_id == project_id,
            Project.is_deleted.is_(False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save_slides(
        self,
        project_id: str,
        slides: List[Dict[str, Any]],
        theme_name: Optional[str]
    ) -> Optional[Project]:
        """Store generated slides and the chosen theme"""
        try:
            project = await self.get_active(project_id)
            if not project:
                logger.warning(f"No project found with ID {project_id} for slide update")
                return None

            project.slides = slides
            project.theme_name = theme_name
            project.updated_at = time.time()

            await self.session.commit()
            await self.session.refresh(project)

            logger.info(f"Saved {len(slides)} slides to project {project_id}")
            return project

        except Exception as e:
            logger.error(f"Error saving slides for project {project_id}: {e}")
            await self.session.rollback()
            raise
