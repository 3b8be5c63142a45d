"""
Image resolution for generated slides
"""

import asyncio
import logging
from typing import List, Optional, Sequence

import aiohttp

from .providers.base import ImageSource, ImageSourceError, BillingRequiredError
from .providers.replicate_provider import ReplicateImageProvider
from .providers.unsplash_provider import UnsplashSearchProvider
from .providers.static_pool_provider import StaticImagePool
from ..layout.models import SlideLayout, ImageItem, find_image_items
from ...core.config import ImageConfig, image_config

logger = logging.getLogger(__name__)

DEFAULT_ALT = "Professional presentation image"


class ImageResolutionService:
    """
    Fills image placeholders with URLs.

    Sources are tried in order until one returns a URL. A billing error from
    any source skips the rest of the chain and goes straight to the static
    pool, which cannot fail.
    """

    def __init__(self, sources: Sequence[ImageSource], fallback: Optional[StaticImagePool] = None):
        self.sources: List[ImageSource] = list(sources)
        self.fallback = fallback or StaticImagePool()

    def get_enabled_sources(self) -> List[ImageSource]:
        return [source for source in self.sources if source.enabled]

    async def resolve_url(self, alt_text: str) -> str:
        for source in self.get_enabled_sources():
            try:
                url = await source.resolve(alt_text)
                if url:
                    return url
                logger.warning(f"Image source {source.name} returned an empty URL")
            except BillingRequiredError as e:
                logger.warning(f"{e}; using static image pool")
                return self.fallback.pick()
            except (ImageSourceError, aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning(f"Image source {source.name} failed: {e}")

        logger.info("All image sources failed, using static image pool")
        return self.fallback.pick()

    async def _resolve_item(self, item: ImageItem):
        alt_text = item.alt or DEFAULT_ALT
        try:
            item.content = await self.resolve_url(alt_text)
        except Exception as e:
            logger.error(f"Unexpected error resolving image '{alt_text[:50]}': {e}")
            item.content = self.fallback.pick()

    async def resolve_images(self, layout: SlideLayout):
        """Overwrite every image node of the layout with a resolved URL"""
        images = find_image_items(layout.content)
        if not images:
            return
        await asyncio.gather(*(self._resolve_item(item) for item in images))

    async def resolve_batch(self, layouts: Sequence[SlideLayout]):
        """Resolve images of all layouts concurrently"""
        await asyncio.gather(*(self.resolve_images(layout) for layout in layouts))


def create_image_service(config: Optional[ImageConfig] = None) -> ImageResolutionService:
    """Build the default chain: Replicate, then Unsplash, then the static pool"""
    config = config or image_config
    sources: List[ImageSource] = [
        ReplicateImageProvider(config.get_provider_config("replicate")),
        UnsplashSearchProvider(config.get_provider_config("unsplash")),
    ]
    enabled = [source.name for source in sources if config.is_provider_configured(source.name)]
    logger.info(f"Image sources enabled: {enabled or 'none (static pool only)'}")
    return ImageResolutionService(sources, StaticImagePool())
