"""
Slide generation API endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from .models import (
    OutlineRequest, OutlineResponse, LayoutsRequest, SlidesResponse,
    ProjectCreateRequest, ProjectLayoutsRequest, ProjectResponse
)
from ..services.layout.orchestrator import BatchOrchestrator
from ..services.outline_service import OutlineService, OutlineGenerationError
from ..services.presentation_service import PresentationService, ServiceResult
from ..services.service_instances import (
    get_orchestrator, get_outline_service, get_presentation_service
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_user_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    """Authenticated user id as forwarded by the auth proxy"""
    return x_user_id.strip() if x_user_id and x_user_id.strip() else None


def _unwrap(result: ServiceResult):
    if not result.ok:
        raise HTTPException(status_code=result.status, detail=result.error or "Request failed")
    return result.data


@router.post("/outlines", response_model=OutlineResponse)
async def generate_outlines(
    request: OutlineRequest,
    outline_service: OutlineService = Depends(get_outline_service)
):
    """Generate outline points for a topic"""
    try:
        outlines = await outline_service.generate_outline(request.topic)
    except OutlineGenerationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return OutlineResponse(outlines=outlines)


@router.post("/layouts", response_model=SlidesResponse)
async def generate_layouts(
    request: LayoutsRequest,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator)
):
    """Generate one slide layout per outline point without storing them"""
    layouts = await orchestrator.generate_all(request.outlines)
    return SlidesResponse(slides=[layout.to_dict() for layout in layouts])


@router.post("/projects", response_model=ProjectResponse)
async def create_project(
    request: ProjectCreateRequest,
    user_id: Optional[str] = Depends(get_user_id),
    presentation_service: PresentationService = Depends(get_presentation_service)
):
    result = await presentation_service.create_project(user_id, request.title, request.outlines)
    return _unwrap(result)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    presentation_service: PresentationService = Depends(get_presentation_service)
):
    return _unwrap(await presentation_service.get_project(project_id))


@router.post("/projects/{project_id}/layouts", response_model=SlidesResponse)
async def generate_project_layouts(
    project_id: str,
    request: ProjectLayoutsRequest,
    user_id: Optional[str] = Depends(get_user_id),
    presentation_service: PresentationService = Depends(get_presentation_service)
):
    """Generate and store slides for every outline point of a project"""
    result = await presentation_service.generate_layouts(project_id, request.theme, user_id)
    if not result.ok:
        logger.warning(f"Layout generation for project {project_id} failed: {result.status} {result.error}")
    return SlidesResponse(slides=_unwrap(result))
