"""
Deterministic slide layouts used when remote generation is unavailable
"""

import random
from typing import Callable, Optional

from .models import (
    SlideLayout, LayoutType, ContainerItem, TextItem, ImageItem, ListItem,
    DEFAULT_SLIDE_CLASS, assign_unique_ids, _new_id
)
from ..image.providers.static_pool_provider import PROFESSIONAL_IMAGES

FALLBACK_LAYOUT_ROTATION = (
    LayoutType.IMAGE_AND_TEXT,
    LayoutType.TEXT_AND_IMAGE,
    LayoutType.TWO_COLUMNS,
    LayoutType.ACCENT_LEFT,
    LayoutType.ACCENT_RIGHT,
)

DEFAULT_BULLETS = (
    "Key concepts and definitions",
    "Practical applications and examples",
    "Benefits and considerations",
    "Future trends and developments",
)

GENERIC_DESCRIPTION = "Explore the key concepts and insights related to this topic."
MAX_TITLE_LENGTH = 80


def derive_title(outline: str) -> str:
    """Text before the first period, then before the first comma, capped"""
    return outline.split(".")[0].split(",")[0][:MAX_TITLE_LENGTH].strip()


def derive_description(outline: str, title: str) -> str:
    remainder = outline.strip()[len(title):] if outline.strip().startswith(title) else ""
    remainder = remainder.lstrip(" .,;:-").strip()
    return remainder or GENERIC_DESCRIPTION


def build_fallback(
    outline: str,
    index: int,
    rng: Optional[random.Random] = None,
    id_factory: Callable[[], str] = _new_id
) -> SlideLayout:
    """
    Build a templated slide: heading, paragraph, stock image and a fixed
    four-item bullet list. Everything except the image URL and identifiers
    depends only on ``outline`` and ``index``.
    """
    rng = rng or random.Random()
    outline = outline or ""
    title = derive_title(outline)
    description = derive_description(outline, title)
    layout_type = FALLBACK_LAYOUT_ROTATION[index % len(FALLBACK_LAYOUT_ROTATION)]

    layout = SlideLayout(
        slide_name=title or f"Slide {index + 1}",
        type=layout_type,
        class_name=DEFAULT_SLIDE_CLASS,
        content=ContainerItem(
            type="column",
            name="Column",
            content=[
                TextItem(type="heading1", name="Heading1", content=title, placeholder="Heading1"),
                TextItem(type="paragraph", name="Paragraph", content=description, placeholder="Content"),
                ImageItem(
                    type="image",
                    name="Image",
                    content=rng.choice(PROFESSIONAL_IMAGES),
                    alt=f"Professional illustration representing {title[:MAX_TITLE_LENGTH]}",
                    placeholder="Image",
                ),
                ListItem(
                    type="bulletList",
                    name="BulletList",
                    content=list(DEFAULT_BULLETS),
                    placeholder="Bullet List",
                ),
            ],
        ),
    )
    return assign_unique_ids(layout, index, id_factory)
