"""
Slide layout models and generation pipeline

The generator and orchestrator live in ``.generator`` and ``.orchestrator``
and are imported from there; they depend on the prompt templates, which in
turn depend on the models exported here.
"""

from .models import (
    ContentType, LayoutType, SlideLayout, ContentItem,
    TextItem, ListItem, TableItem, ImageItem, ContainerItem,
    DEFAULT_SLIDE_CLASS, iter_content_items, find_image_items, assign_unique_ids
)
from .json_repair import repair_json
from .validator import is_valid_layout
from .fallback import build_fallback, FALLBACK_LAYOUT_ROTATION, DEFAULT_BULLETS

__all__ = [
    "ContentType",
    "LayoutType",
    "SlideLayout",
    "ContentItem",
    "TextItem",
    "ListItem",
    "TableItem",
    "ImageItem",
    "ContainerItem",
    "DEFAULT_SLIDE_CLASS",
    "iter_content_items",
    "find_image_items",
    "assign_unique_ids",
    "repair_json",
    "is_valid_layout",
    "build_fallback",
    "FALLBACK_LAYOUT_ROTATION",
    "DEFAULT_BULLETS",
]
