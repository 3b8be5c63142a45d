from __future__ import annotations

import random

from slidecraft.services.image.providers.static_pool_provider import PROFESSIONAL_IMAGES
from slidecraft.services.layout.fallback import (
    DEFAULT_BULLETS,
    FALLBACK_LAYOUT_ROTATION,
    GENERIC_DESCRIPTION,
    build_fallback,
)
from slidecraft.services.layout.models import (
    ContainerItem,
    ImageItem,
    LayoutType,
    ListItem,
    TextItem,
    iter_content_items,
)


def _shape(layout):
    heading, paragraph, image, bullets = layout.content.content
    return (layout.slide_name, layout.type, heading.content, paragraph.content, image.alt, tuple(bullets.content))


def test_fallback_structure() -> None:
    layout = build_fallback("Solar power basics. How panels turn light into current", 0)

    assert layout.type is LayoutType.IMAGE_AND_TEXT
    assert layout.slide_order == 1
    assert isinstance(layout.content, ContainerItem)
    heading, paragraph, image, bullets = layout.content.content
    assert isinstance(heading, TextItem) and heading.type == "heading1"
    assert heading.content == "Solar power basics"
    assert isinstance(paragraph, TextItem) and paragraph.type == "paragraph"
    assert paragraph.content == "How panels turn light into current"
    assert isinstance(image, ImageItem)
    assert image.content in PROFESSIONAL_IMAGES
    assert image.alt == "Professional illustration representing Solar power basics"
    assert isinstance(bullets, ListItem)
    assert tuple(bullets.content) == DEFAULT_BULLETS


def test_fallback_title_stops_at_comma_and_is_capped() -> None:
    assert build_fallback("Markets, trends and risks", 0).slide_name == "Markets"
    assert len(build_fallback("x" * 200, 0).slide_name) == 80


def test_fallback_without_remainder_uses_generic_body() -> None:
    layout = build_fallback("Quantum computing", 2)

    assert layout.content.content[1].content == GENERIC_DESCRIPTION


def test_fallback_rotates_layout_types() -> None:
    types = [build_fallback("Topic", i).type for i in range(7)]

    assert types[:5] == list(FALLBACK_LAYOUT_ROTATION)
    assert types[5] is FALLBACK_LAYOUT_ROTATION[0]
    assert types[6] is FALLBACK_LAYOUT_ROTATION[1]


def test_fallback_is_deterministic_apart_from_image_and_ids() -> None:
    outline = "Remote work, benefits and pitfalls for small teams"

    assert _shape(build_fallback(outline, 4)) == _shape(build_fallback(outline, 4))


def test_seeded_rng_makes_image_choice_repeatable() -> None:
    first = build_fallback("Topic", 0, rng=random.Random(7)).content.content[2].content
    second = build_fallback("Topic", 0, rng=random.Random(7)).content.content[2].content

    assert first == second


def test_fallback_ids_are_unique() -> None:
    layout = build_fallback("Topic. Details", 1)
    ids = [item.id for item in iter_content_items(layout.content)]

    assert len(ids) == len(set(ids)) == 5
    assert all(item_id.startswith(layout.id) for item_id in ids)
