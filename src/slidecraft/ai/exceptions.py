"""
Exceptions raised by AI providers
"""

from typing import Optional


class AIProviderError(Exception):
    """Base class for text generation failures"""


class ProviderNotConfiguredError(AIProviderError):
    """The provider has no credentials configured"""


class RemoteError(AIProviderError):
    """The remote endpoint answered with a non-success HTTP status"""

    def __init__(self, status: int, body: Optional[str] = None, provider: str = "remote"):
        self.status = status
        self.body = body or ""
        self.provider = provider
        super().__init__(f"{provider} API error {status}: {self.body[:300]}")

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 429


class EmptyResponseError(AIProviderError):
    """The response carried no extractable text"""
