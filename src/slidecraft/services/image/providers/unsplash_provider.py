"""
Unsplash stock photo search provider
"""

import logging
from typing import Dict, Any

import aiohttp

from .base import ImageSourceError, read_json_object

logger = logging.getLogger(__name__)


def build_search_query(alt_text: str, max_words: int = 3, min_length: int = 4) -> str:
    """Keep the first ``max_words`` words that are longer than three characters"""
    words = [word for word in (alt_text or "").lower().split() if len(word) >= min_length]
    return " ".join(words[:max_words])


class UnsplashSearchProvider:
    """Single-result landscape photo search"""

    name = "unsplash"

    def __init__(self, config: Dict[str, Any]):
        self.api_key = config.get('api_key', '')
        self.api_base = config.get('api_base', 'https://api.unsplash.com')
        self.timeout = config.get('timeout', 30)

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def resolve(self, alt_text: str) -> str:
        if not self.enabled:
            raise ImageSourceError("Unsplash API key not configured")

        query = build_search_query(alt_text) or (alt_text or "").strip().lower()
        url = f"{self.api_base.rstrip('/')}/search/photos"
        params = {
            'query': query,
            'per_page': 1,
            'orientation': 'landscape',
            'content_filter': 'high',
        }
        headers = {'Authorization': f'Client-ID {self.api_key}'}

        logger.debug(f"Unsplash search: {url} with query: {query}")
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
            async with session.get(url, params=params, headers=headers) as response:
                if response.status != 200:
                    error_msg = f"Unsplash API error: {response.status}"
                    if response.status == 401:
                        error_msg = "Invalid Unsplash API key"
                    elif response.status == 403:
                        error_msg = "Unsplash API rate limit exceeded"
                    raise ImageSourceError(error_msg)

                data = await read_json_object(response, "Unsplash")

        results = data.get('results')
        if not isinstance(results, list) or not results:
            raise ImageSourceError(f"No Unsplash results for '{query}'")

        first = results[0] if isinstance(results[0], dict) else {}
        urls = first.get('urls')
        image_url = urls.get('regular') if isinstance(urls, dict) else None
        if not isinstance(image_url, str) or not image_url:
            raise ImageSourceError("Unsplash result has no regular URL")

        logger.info(f"Unsplash image found: {image_url[:50]}...")
        return image_url
