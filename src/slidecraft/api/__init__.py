"""
HTTP API
"""

from .slides_api import router

__all__ = ["router"]
