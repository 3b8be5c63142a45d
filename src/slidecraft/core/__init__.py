"""
Core configuration for SlideCraft
"""

from .config import ai_config, image_config, app_config, AIConfig, ImageConfig, AppConfig

__all__ = ["ai_config", "image_config", "app_config", "AIConfig", "ImageConfig", "AppConfig"]
