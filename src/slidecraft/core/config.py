"""
Configuration management for SlideCraft
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables with error handling
try:
    # 1) Try default behavior (usually searches from CWD)
    loaded = load_dotenv()
    # 2) If not found, try project root (directory that contains pyproject.toml)
    if not loaded:
        for parent in Path(__file__).resolve().parents:
            if (parent / "pyproject.toml").exists():
                env_path = parent / ".env"
                if env_path.exists():
                    load_dotenv(env_path)
                break
except (PermissionError, FileNotFoundError):
    # Fall back to plain process environment variables
    pass
except Exception as e:
    logging.getLogger(__name__).warning(f"Could not load .env file: {e}")


class AIConfig(BaseSettings):
    """Text generation settings and layout pipeline tuning"""

    # Google Gemini Configuration
    gemini_api_key: Optional[str] = Field(default=None, env="GEMINI_API_KEY")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com", env="GEMINI_BASE_URL")
    gemini_model: str = Field(default="gemini-1.5-flash", env="GEMINI_MODEL")
    gemini_api_version: str = Field(default="v1", env="GEMINI_API_VERSION")

    # Provider Selection
    default_ai_provider: str = Field(default="gemini", env="DEFAULT_AI_PROVIDER")

    # Generation Parameters
    temperature: float = Field(default=0.7, env="TEMPERATURE")
    top_k: int = Field(default=40, env="TOP_K")
    top_p: float = Field(default=0.95, env="TOP_P")
    max_output_tokens: int = Field(default=2048, env="MAX_OUTPUT_TOKENS")
    ai_request_timeout: int = Field(default=300, env="AI_REQUEST_TIMEOUT")

    # Layout pipeline
    layout_max_retries: int = Field(default=2, env="LAYOUT_MAX_RETRIES")
    layout_retry_backoff: float = Field(default=1.0, env="LAYOUT_RETRY_BACKOFF")
    layout_throttle_delay: float = Field(default=0.5, env="LAYOUT_THROTTLE_DELAY")

    # Logging
    log_ai_requests: bool = Field(default=False, env="LOG_AI_REQUESTS")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore"
    }

    def get_provider_config(self, provider: Optional[str] = None) -> Dict[str, Any]:
        """Get configuration for a specific AI provider"""
        provider = (provider or self.default_ai_provider).lower()

        gemini = {
            "api_key": self.gemini_api_key,
            "base_url": self.gemini_base_url,
            "model": self.gemini_model,
            "api_version": self.gemini_api_version,
            "temperature": self.temperature,
            "top_k": self.top_k,
            "top_p": self.top_p,
            "max_output_tokens": self.max_output_tokens,
            "timeout": self.ai_request_timeout,
        }
        configs = {
            "gemini": gemini,
            "google": gemini,  # Alias for gemini
        }
        return configs.get(provider, gemini)

    def is_provider_available(self, provider: Optional[str] = None) -> bool:
        """Check if a provider is properly configured"""
        return bool(self.get_provider_config(provider).get("api_key"))


class ImageConfig(BaseSettings):
    """Image provider settings"""

    # Replicate (paid image generation)
    replicate_api_token: Optional[str] = Field(default=None, env="REPLICATE_API_TOKEN")
    replicate_base_url: str = Field(default="https://api.replicate.com/v1", env="REPLICATE_BASE_URL")
    replicate_model_version: str = Field(
        default="7762fd07cf82c948538e41f63f77d685e02b063e37e496e96eefd46c929f9bdc",
        env="REPLICATE_MODEL_VERSION"
    )
    replicate_width: int = Field(default=1024, env="REPLICATE_WIDTH")
    replicate_height: int = Field(default=768, env="REPLICATE_HEIGHT")
    replicate_poll_interval: float = Field(default=2.0, env="REPLICATE_POLL_INTERVAL")
    replicate_max_poll_attempts: int = Field(default=30, env="REPLICATE_MAX_POLL_ATTEMPTS")

    # Unsplash (stock photo search)
    unsplash_access_key: Optional[str] = Field(default=None, env="UNSPLASH_ACCESS_KEY")
    unsplash_base_url: str = Field(default="https://api.unsplash.com", env="UNSPLASH_BASE_URL")

    image_request_timeout: int = Field(default=30, env="IMAGE_REQUEST_TIMEOUT")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore"
    }

    def get_provider_config(self, provider: str) -> Dict[str, Any]:
        """Get configuration dict for an image provider"""
        configs = {
            "replicate": {
                "api_token": self.replicate_api_token,
                "api_base": self.replicate_base_url,
                "model_version": self.replicate_model_version,
                "width": self.replicate_width,
                "height": self.replicate_height,
                "poll_interval": self.replicate_poll_interval,
                "max_poll_attempts": self.replicate_max_poll_attempts,
                "timeout": self.image_request_timeout,
            },
            "unsplash": {
                "api_key": self.unsplash_access_key,
                "api_base": self.unsplash_base_url,
                "timeout": self.image_request_timeout,
            },
        }
        if provider not in configs:
            raise ValueError(f"Unknown image provider: {provider}")
        return configs[provider]

    def is_provider_configured(self, provider: str) -> bool:
        config = self.get_provider_config(provider)
        return bool(config.get("api_token") or config.get("api_key"))


class AppConfig(BaseSettings):
    """Application configuration"""

    # Server Configuration
    host: str = Field(default="0.0.0.0", env="HOST")
    port: int = Field(default=8000, env="PORT")
    debug: bool = Field(default=True, env="DEBUG")
    reload: bool = Field(default=True, env="RELOAD")

    database_url: str = Field(default="sqlite:///./slidecraft.db", env="DATABASE_URL")

    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, env="LOG_FILE")

    model_config = {
        "case_sensitive": False,
        "extra": "ignore"
    }


# Global configuration instances
ai_config = AIConfig()
image_config = ImageConfig()
app_config = AppConfig()
