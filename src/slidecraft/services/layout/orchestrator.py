"""
Batch slide layout generation
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Sequence, TYPE_CHECKING

from .fallback import build_fallback
from .generator import LayoutGenerator, QuotaExceededError
from .models import SlideLayout
from ...core.config import ai_config
from ...utils.logger import ProgressLogger

if TYPE_CHECKING:
    from ..image.image_service import ImageResolutionService

logger = logging.getLogger(__name__)


@dataclass
class BatchContext:
    """Per-batch state; quota_exhausted is sticky once set"""
    quota_exhausted: bool = False
    generated: int = 0
    fallbacks: int = 0


class BatchOrchestrator:
    """
    Turns an ordered list of outline points into the same number of slide
    layouts, in the same order. Items are processed one at a time so a
    quota signal from item N stops remote calls for every later item.
    Never raises; every failure degrades to a fallback layout.
    """

    def __init__(
        self,
        generator: LayoutGenerator,
        image_service: Optional["ImageResolutionService"] = None,
        max_retries: Optional[int] = None,
        retry_backoff: Optional[float] = None,
        throttle_delay: Optional[float] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        fallback_rng: Optional[random.Random] = None
    ):
        self.generator = generator
        self.image_service = image_service
        self.max_retries = ai_config.layout_max_retries if max_retries is None else max_retries
        self.retry_backoff = ai_config.layout_retry_backoff if retry_backoff is None else retry_backoff
        self.throttle_delay = ai_config.layout_throttle_delay if throttle_delay is None else throttle_delay
        self._sleep = sleep
        self.fallback_rng = fallback_rng or random.Random()

    async def generate_all(self, outlines: Sequence[str]) -> List[SlideLayout]:
        outlines = list(outlines)
        context = BatchContext()
        layouts: List[SlideLayout] = []

        if not outlines:
            return layouts

        if not self.generator.is_available():
            logger.warning("Text generation provider is not configured, using fallback layouts for the whole batch")
            context.quota_exhausted = True

        logger.info(f"Starting layout generation for {len(outlines)} outlines")
        progress = ProgressLogger(logger, len(outlines))

        for index, outline in enumerate(outlines):
            layout = None
            if context.quota_exhausted:
                logger.info(f"Skipping remote call for layout {index + 1}, quota exhausted")
            else:
                layout = await self._generate_with_retries(outline, index, context)

            from_remote = layout is not None
            if not from_remote:
                layout = build_fallback(outline, index, rng=self.fallback_rng)
                context.fallbacks += 1
                progress.update(f"Layout {index + 1} built from fallback template")
            else:
                context.generated += 1
                progress.update(f"Layout {index + 1} generated")

            layouts.append(layout)

            is_last = index == len(outlines) - 1
            if from_remote and not is_last and not context.quota_exhausted:
                await self._sleep(self.throttle_delay)

        await self._resolve_images(layouts)

        progress.complete(
            f"Generated {len(layouts)} layouts ({context.generated} remote, {context.fallbacks} fallback)"
        )
        return layouts

    async def _generate_with_retries(
        self,
        outline: str,
        index: int,
        context: BatchContext
    ) -> Optional[SlideLayout]:
        for attempt in range(self.max_retries):
            if attempt > 0:
                logger.info(f"Retry {attempt} for layout {index + 1}")
                await self._sleep(self.retry_backoff)

            try:
                layout = await self.generator.generate_one(outline, index)
            except QuotaExceededError:
                logger.warning(
                    f"Quota exhausted at layout {index + 1}, switching to fallback for the remaining layouts"
                )
                context.quota_exhausted = True
                return None
            except Exception as e:
                logger.error(f"Unexpected error generating layout {index + 1}: {e}")
                layout = None

            if layout is not None:
                return layout

        logger.info(f"All {self.max_retries} attempts failed for layout {index + 1}")
        return None

    async def _resolve_images(self, layouts: List[SlideLayout]):
        if self.image_service is None or not layouts:
            return
        logger.info(f"Resolving images for {len(layouts)} layouts")
        try:
            await self.image_service.resolve_batch(layouts)
        except Exception as e:
            logger.error(f"Image resolution failed: {e}")
