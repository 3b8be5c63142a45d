"""
Text generation providers
"""

from .providers import GoogleProvider, create_ai_provider, get_ai_provider
from .base import AIProvider, AIMessage, AIResponse, MessageRole
from .exceptions import AIProviderError, RemoteError, EmptyResponseError, ProviderNotConfiguredError

__all__ = [
    "GoogleProvider",
    "create_ai_provider",
    "get_ai_provider",
    "AIProvider",
    "AIMessage",
    "AIResponse",
    "MessageRole",
    "AIProviderError",
    "RemoteError",
    "EmptyResponseError",
    "ProviderNotConfiguredError",
]
