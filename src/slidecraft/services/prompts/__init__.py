"""
Prompt templates
"""

from .outline_prompts import OutlinePrompts
from .layout_prompts import LayoutPrompts

__all__ = [
    'OutlinePrompts',
    'LayoutPrompts',
]
