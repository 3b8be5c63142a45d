"""
Shared service instances (lazy initialization)
"""

from .image.image_service import ImageResolutionService, create_image_service
from .layout.generator import LayoutGenerator
from .layout.orchestrator import BatchOrchestrator
from .outline_service import OutlineService
from .presentation_service import PresentationService
from ..ai.providers import get_ai_provider

_image_service = None
_orchestrator = None
_outline_service = None
_presentation_service = None

def get_image_service() -> ImageResolutionService:
    global _image_service
    if _image_service is None:
        _image_service = create_image_service()
    return _image_service

def get_orchestrator() -> BatchOrchestrator:
    """Get the batch layout orchestrator (lazy initialization)"""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = BatchOrchestrator(
            LayoutGenerator(get_ai_provider()),
            image_service=get_image_service()
        )
    return _orchestrator

def get_outline_service() -> OutlineService:
    global _outline_service
    if _outline_service is None:
        _outline_service = OutlineService(get_ai_provider())
    return _outline_service

def get_presentation_service() -> PresentationService:
    global _presentation_service
    if _presentation_service is None:
        _presentation_service = PresentationService(get_orchestrator())
    return _presentation_service
