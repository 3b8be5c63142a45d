"""
Text completion provider contract
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class AIMessage(BaseModel):
    """One turn of a prompt"""
    role: MessageRole
    content: str
    name: Optional[str] = None


class AIResponse(BaseModel):
    """Completion text plus accounting details"""
    content: str
    model: str
    usage: Dict[str, int] = Field(default_factory=dict)
    finish_reason: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class AIProvider(ABC):
    """
    A remote text generator.

    Each request is a single remote call. Providers never retry; the layout
    orchestrator owns retry, backoff and quota handling.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.model = config.get("model", "unknown")

    @abstractmethod
    async def chat_completion(self, messages: List[AIMessage], **kwargs) -> AIResponse:
        """Send the messages and return the generated text"""

    async def text_completion(self, prompt: str, **kwargs) -> AIResponse:
        return await self.chat_completion([AIMessage(role=MessageRole.USER, content=prompt)], **kwargs)

    def is_available(self) -> bool:
        """Whether credentials are configured"""
        return bool(self.config.get("api_key"))

    @staticmethod
    def _estimate_usage(prompt: str, completion: str) -> Dict[str, int]:
        # word counts stand in for tokens when the remote reports no usage
        prompt_words = len(prompt.split())
        completion_words = len(completion.split())
        return {
            "prompt_tokens": prompt_words,
            "completion_tokens": completion_words,
            "total_tokens": prompt_words + completion_words,
        }

    def _request_config(self, **overrides) -> Dict[str, Any]:
        """Provider settings with per-request overrides applied"""
        return {**self.config, **overrides}
