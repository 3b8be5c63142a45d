"""
Image resolution service
"""

from .image_service import ImageResolutionService, create_image_service, DEFAULT_ALT

__all__ = [
    "ImageResolutionService",
    "create_image_service",
    "DEFAULT_ALT",
]
