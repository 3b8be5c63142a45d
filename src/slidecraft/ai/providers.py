"""
AI provider implementations
"""

import json
import logging
from typing import List, Dict, Any, Optional

import aiohttp

from .base import AIProvider, AIMessage, AIResponse
from .exceptions import RemoteError, EmptyResponseError, ProviderNotConfiguredError
from ..core.config import ai_config

logger = logging.getLogger(__name__)


class GoogleProvider(AIProvider):
    """Google Gemini provider over the public REST endpoint"""

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.api_key = config.get("api_key")
        self.base_url = config.get("base_url", "https://generativelanguage.googleapis.com")
        self.api_version = (config.get("api_version") or "v1").strip("/")
        self.timeout = config.get("timeout", 300)

    @staticmethod
    def _normalize_base_url(base_url: str) -> str:
        base_url = (base_url or "").strip()
        if not base_url:
            base_url = "https://generativelanguage.googleapis.com"
        if not base_url.startswith("http://") and not base_url.startswith("https://"):
            base_url = "https://" + base_url
        base_url = base_url.rstrip("/")
        # Allow users to paste a full versioned base; normalize back to the host root.
        for suffix in ("/v1beta", "/v1"):
            if base_url.endswith(suffix):
                base_url = base_url[: -len(suffix)]
                break
        return base_url

    @staticmethod
    def _normalize_model_name(model: str) -> str:
        model = (model or "").strip() or "gemini-1.5-flash"
        if model.startswith("models/"):
            model = model.split("/", 1)[1]
        return model

    @staticmethod
    def _messages_to_prompt(messages: List[AIMessage]) -> str:
        """Flatten messages into one prompt; a lone user message is sent verbatim"""
        if len(messages) == 1:
            return messages[0].content
        return "\n\n".join(f"[{msg.role.value.upper()}]: {msg.content}" for msg in messages)

    @staticmethod
    def _extract_text(response_data: Dict[str, Any]) -> str:
        """Read candidates[0].content.parts[*].text"""
        candidates = response_data.get("candidates") or []
        if not candidates:
            return ""
        candidate = candidates[0] or {}
        parts = ((candidate.get("content") or {}).get("parts") or [])
        text_parts: List[str] = []
        for p in parts:
            t = p.get("text") if isinstance(p, dict) else None
            if isinstance(t, str) and t:
                text_parts.append(t)
        return "".join(text_parts)

    async def _generate_via_rest(
        self,
        *,
        model: str,
        prompt: str,
        generation_config: Dict[str, Any],
    ) -> Dict[str, Any]:
        if not self.api_key:
            raise ProviderNotConfiguredError("Gemini API key not configured")

        base_url = self._normalize_base_url(self.base_url)
        model = self._normalize_model_name(model)
        url = f"{base_url}/{self.api_version}/models/{model}:generateContent"

        body: Dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                url,
                params={"key": self.api_key},
                json=body,
                headers={"Content-Type": "application/json"}
            ) as resp:
                raw = await resp.text()
                if not 200 <= resp.status < 300:
                    raise RemoteError(resp.status, raw, provider="Gemini")

                try:
                    return json.loads(raw) if raw else {}
                except json.JSONDecodeError:
                    raise EmptyResponseError(f"Gemini returned a non-JSON body: {raw[:200]}")

    @staticmethod
    def _reported_usage(response_data: Dict[str, Any]) -> Dict[str, int]:
        meta = response_data.get("usageMetadata") or {}
        if not meta:
            return {}
        fields = {
            "prompt_tokens": "promptTokenCount",
            "completion_tokens": "candidatesTokenCount",
            "total_tokens": "totalTokenCount",
        }
        return {name: int(meta.get(key) or 0) for name, key in fields.items()}

    async def chat_completion(self, messages: List[AIMessage], **kwargs) -> AIResponse:
        """Single generateContent call; raises on HTTP errors and empty output"""
        config = self._request_config(**kwargs)
        prompt = self._messages_to_prompt(messages)

        generation_config = {
            "temperature": config.get("temperature", 0.7),
            "topK": config.get("top_k", 40),
            "topP": config.get("top_p", 0.95),
            "maxOutputTokens": config.get("max_output_tokens", 2048),
        }

        if ai_config.log_ai_requests:
            logger.debug(f"Gemini request ({len(prompt)} chars): {prompt[:200]}...")

        response_data = await self._generate_via_rest(
            model=config.get("model", self.model),
            prompt=prompt,
            generation_config=generation_config,
        )

        content = self._extract_text(response_data)
        if not content:
            logger.error(f"No text in Gemini response: {str(response_data)[:300]}")
            raise EmptyResponseError("No text content received from Gemini")

        candidate = (response_data.get("candidates") or [{}])[0] or {}
        usage = self._reported_usage(response_data) or self._estimate_usage(prompt, content)

        return AIResponse(
            content=content,
            model=self._normalize_model_name(config.get("model", self.model)),
            usage=usage,
            finish_reason=str(candidate.get("finishReason") or "stop"),
            metadata={"provider": "google"}
        )


PROVIDERS = {
    "gemini": GoogleProvider,
    "google": GoogleProvider,
}

_provider_cache: Dict[str, AIProvider] = {}


def create_ai_provider(provider_name: str, config: Optional[Dict[str, Any]] = None) -> AIProvider:
    """Build a provider from its registered name and settings"""
    try:
        provider_class = PROVIDERS[provider_name]
    except KeyError:
        raise ValueError(f"Unknown provider: {provider_name}") from None
    return provider_class(config if config is not None else ai_config.get_provider_config(provider_name))


def get_ai_provider(provider_name: Optional[str] = None) -> AIProvider:
    """Shared provider instance; unknown names resolve to Gemini"""
    name = (provider_name or ai_config.default_ai_provider).lower()
    if name not in PROVIDERS:
        logger.warning(f"Unknown provider '{name}', using 'gemini'")
        name = "gemini"

    if name not in _provider_cache:
        _provider_cache[name] = create_ai_provider(name)
    return _provider_cache[name]
