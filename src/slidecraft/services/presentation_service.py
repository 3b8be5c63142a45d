"""
Project-scoped slide generation and storage
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from .layout.orchestrator import BatchOrchestrator
from ..database.database import AsyncSessionLocal
from ..database.repositories import UserRepository, ProjectRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Status code plus either data or an error message"""
    status: int
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 200


class PresentationService:
    """Binds the layout pipeline to stored projects"""

    def __init__(
        self,
        orchestrator: BatchOrchestrator,
        session_factory: Optional[async_sessionmaker] = None
    ):
        self.orchestrator = orchestrator
        self.session_factory = session_factory or AsyncSessionLocal

    async def generate_layouts(
        self,
        project_id: str,
        theme: Optional[str],
        user_external_id: Optional[str]
    ) -> ServiceResult:
        """
        Generate slides for every outline point of a project and store them
        together with the theme. Storage failures are reported, not retried.
        """
        if not project_id:
            return ServiceResult(400, error="Project ID is required")
        if not user_external_id:
            return ServiceResult(403, error="User not authenticated")

        try:
            async with self.session_factory() as session:
                user = await UserRepository(session).get_by_external_id(user_external_id)
                if not user:
                    return ServiceResult(403, error="User not found in the database")

                project = await ProjectRepository(session).get_active(project_id)
                if not project:
                    return ServiceResult(404, error="Project not found")

                outlines = list(project.outlines or [])
        except SQLAlchemyError as e:
            logger.error(f"Failed to load project {project_id}: {e}")
            return ServiceResult(500, error="Internal server error", data=[])

        if not outlines:
            return ServiceResult(400, error="Project does not have any outlines")

        layouts = await self.orchestrator.generate_all(outlines)
        slides = [layout.to_dict() for layout in layouts]

        logger.info(f"Saving {len(slides)} slides to project {project_id}")
        try:
            async with self.session_factory() as session:
                saved = await ProjectRepository(session).save_slides(project_id, slides, theme)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save slides for project {project_id}: {e}")
            return ServiceResult(500, error="Internal server error", data=[])

        if saved is None:
            return ServiceResult(404, error="Project not found")
        return ServiceResult(200, data=slides)

    async def create_project(
        self,
        user_external_id: Optional[str],
        title: str,
        outlines: Sequence[str]
    ) -> ServiceResult:
        if not user_external_id:
            return ServiceResult(403, error="User not authenticated")

        points: List[str] = [point.strip() for point in outlines if point and point.strip()]
        if not points:
            return ServiceResult(400, error="Project does not have any outlines")

        try:
            async with self.session_factory() as session:
                user = await UserRepository(session).get_or_create(user_external_id)
                project = await ProjectRepository(session).create({
                    "user_id": user.id,
                    "title": (title or "").strip() or "Untitled",
                    "outlines": points,
                })
                logger.info(f"Created project {project.project_id} with {len(points)} outline points")
                return ServiceResult(200, data=project.to_dict())
        except SQLAlchemyError as e:
            logger.error(f"Failed to create project: {e}")
            return ServiceResult(500, error="Internal server error")

    async def get_project(self, project_id: str) -> ServiceResult:
        if not project_id:
            return ServiceResult(400, error="Project ID is required")

        try:
            async with self.session_factory() as session:
                project = await ProjectRepository(session).get_active(project_id)
                if not project:
                    return ServiceResult(404, error="Project not found")
                return ServiceResult(200, data=project.to_dict())
        except SQLAlchemyError as e:
            logger.error(f"Failed to load project {project_id}: {e}")
            return ServiceResult(500, error="Internal server error")
