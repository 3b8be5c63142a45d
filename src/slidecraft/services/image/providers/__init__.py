"""
Image source implementations
"""

from .base import ImageSource, ImageSourceError, BillingRequiredError
from .replicate_provider import ReplicateImageProvider, build_image_prompt
from .unsplash_provider import UnsplashSearchProvider, build_search_query
from .static_pool_provider import StaticImagePool, PROFESSIONAL_IMAGES

__all__ = [
    "ImageSource",
    "ImageSourceError",
    "BillingRequiredError",
    "ReplicateImageProvider",
    "build_image_prompt",
    "UnsplashSearchProvider",
    "build_search_query",
    "StaticImagePool",
    "PROFESSIONAL_IMAGES",
]
