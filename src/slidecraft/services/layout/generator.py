"""
Single slide layout generation through a text completion provider
"""

import asyncio
import logging
from typing import Optional

import aiohttp
from pydantic import ValidationError

from .json_repair import repair_json
from .models import SlideLayout, assign_unique_ids
from .validator import is_valid_layout
from ..prompts.layout_prompts import LayoutPrompts
from ...ai.base import AIProvider
from ...ai.exceptions import AIProviderError, RemoteError

logger = logging.getLogger(__name__)


class QuotaExceededError(Exception):
    """The text generation endpoint reported rate limiting or quota exhaustion"""

    def __init__(self, message: str = "Text generation quota exceeded", status: int = 429):
        self.status = status
        super().__init__(message)


class LayoutGenerator:
    """Generates one slide layout per call; never retries"""

    def __init__(self, provider: AIProvider):
        self.provider = provider

    def is_available(self) -> bool:
        return self.provider.is_available()

    async def generate_one(self, outline: str, index: int) -> Optional[SlideLayout]:
        """
        Return a parsed layout with canonical identifiers, or None when the
        model output is unusable. Raises QuotaExceededError on HTTP 429.
        """
        prompt = LayoutPrompts.get_single_layout_prompt(outline, index)

        try:
            response = await self.provider.text_completion(prompt)
        except RemoteError as e:
            if e.is_rate_limited:
                raise QuotaExceededError(str(e), e.status) from e
            logger.warning(f"Layout {index + 1}: remote error {e.status}")
            return None
        except (AIProviderError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Layout {index + 1}: completion failed: {e}")
            return None

        candidate = repair_json(response.content)
        if not is_valid_layout(candidate):
            logger.warning(f"Layout {index + 1}: invalid layout JSON: {candidate[:200]}")
            return None

        try:
            layout = SlideLayout.model_validate_json(candidate)
        except ValidationError as e:
            logger.warning(f"Layout {index + 1}: layout does not match the content model: {e.error_count()} errors")
            return None

        return assign_unique_ids(layout, index)
