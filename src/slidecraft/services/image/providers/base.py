"""
Image source contract and errors
"""

from typing import Any, Dict, Protocol, runtime_checkable

import aiohttp


class ImageSourceError(Exception):
    """An image source could not produce a URL"""


class BillingRequiredError(ImageSourceError):
    """The paid provider answered HTTP 402"""


@runtime_checkable
class ImageSource(Protocol):
    """Anything that can turn alt text into an image URL"""

    name: str

    @property
    def enabled(self) -> bool:
        ...

    async def resolve(self, alt_text: str) -> str:
        """Return an image URL or raise ImageSourceError"""
        ...


async def read_json_object(response: aiohttp.ClientResponse, source: str) -> Dict[str, Any]:
    """Decode a response body that must be a JSON object"""
    try:
        data = await response.json(content_type=None)
    except ValueError as e:
        raise ImageSourceError(f"{source} returned a malformed body: {e}") from e
    if not isinstance(data, dict):
        raise ImageSourceError(f"{source} returned {type(data).__name__} instead of a JSON object")
    return data
