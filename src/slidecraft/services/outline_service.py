"""
Outline generation: topic in, ordered outline points out
"""

import asyncio
import json
import logging
from typing import List, Optional

import aiohttp

from .layout.json_repair import repair_json
from .prompts.outline_prompts import OutlinePrompts
from ..ai.base import AIProvider
from ..ai.exceptions import AIProviderError, EmptyResponseError, RemoteError

logger = logging.getLogger(__name__)


class OutlineGenerationError(Exception):
    """Outline generation failed; carries an HTTP-style status code"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def build_fallback_outline(topic: str) -> List[str]:
    """Generic seven-point outline used when the provider is out of quota"""
    return [
        f"Introduction to {topic} and its significance",
        f"Key concepts and principles of {topic}",
        f"Historical background and development of {topic}",
        f"Current applications and real-world examples of {topic}",
        f"Benefits and advantages of {topic}",
        f"Future trends and developments in {topic}",
        f"Conclusion and key takeaways about {topic}",
    ]


class OutlineService:
    """Asks the text provider for outline points"""

    def __init__(self, provider: AIProvider):
        self.provider = provider

    async def generate_outline(self, topic: str) -> List[str]:
        topic = (topic or "").strip()
        if not topic:
            raise OutlineGenerationError(400, "Topic is required")

        prompt = OutlinePrompts.get_outline_prompt(topic)
        try:
            response = await self.provider.text_completion(prompt)
        except RemoteError as e:
            if e.is_rate_limited:
                logger.warning(f"Text generation quota exceeded, using fallback outline for '{topic}'")
                return build_fallback_outline(topic)
            raise OutlineGenerationError(500, f"Internal server error: {e}") from e
        except EmptyResponseError as e:
            raise OutlineGenerationError(400, "No content generated") from e
        except (AIProviderError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise OutlineGenerationError(500, f"Internal server error: {e}") from e

        outlines = self._parse_outlines(response.content)
        if outlines is None:
            logger.error(f"Invalid outline JSON received: {response.content[:300]}")
            raise OutlineGenerationError(500, "Invalid JSON format received from AI")

        logger.info(f"Generated {len(outlines)} outline points for '{topic}'")
        return outlines

    @staticmethod
    def _parse_outlines(raw_text: str) -> Optional[List[str]]:
        try:
            data = json.loads(repair_json(raw_text))
        except ValueError:
            return None

        outlines = data.get("outlines") if isinstance(data, dict) else None
        if not isinstance(outlines, list):
            return None
        points = [str(point).strip() for point in outlines if str(point).strip()]
        return points or None
