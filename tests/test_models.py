from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from slidecraft.services.layout.models import (
    ContainerItem,
    ContentType,
    ImageItem,
    LayoutType,
    SlideLayout,
    TableItem,
    assign_unique_ids,
    find_image_items,
    iter_content_items,
)

from conftest import layout_json, layout_payload


def test_enumerations_cover_all_tags() -> None:
    assert len(ContentType) == 18
    assert len(LayoutType) == 13
    assert ContentType("resizable-column") is ContentType.RESIZABLE_COLUMN
    assert LayoutType("tableLayout") is LayoutType.TABLE_LAYOUT


def test_parse_builds_typed_tree() -> None:
    layout = SlideLayout.model_validate_json(layout_json())

    assert layout.type is LayoutType.IMAGE_AND_TEXT
    assert isinstance(layout.content, ContainerItem)
    nested = layout.content.content[1]
    assert isinstance(nested, ContainerItem)
    assert isinstance(nested.content[0], ImageItem)
    assert nested.content[0].alt == "city skyline at night"


def test_table_content_is_rows_of_cells() -> None:
    payload = layout_payload(layout_type="tableLayout")
    payload["content"] = {"type": "table", "content": [["Year", "Revenue"], ["2024", 12]]}

    layout = SlideLayout.model_validate(payload)

    assert isinstance(layout.content, TableItem)
    assert layout.content.content[1] == ["2024", "12"]


def test_unknown_tags_are_rejected() -> None:
    bad_layout = layout_payload(layout_type="spiral")
    with pytest.raises(ValidationError):
        SlideLayout.model_validate(bad_layout)

    bad_content = layout_payload()
    bad_content["content"]["content"][0]["type"] = "hologram"
    with pytest.raises(ValidationError):
        SlideLayout.model_validate(bad_content)


def test_iter_and_find_images_walk_nested_containers() -> None:
    layout = SlideLayout.model_validate_json(layout_json())

    assert len(list(iter_content_items(layout.content))) == 5
    images = find_image_items(layout.content)
    assert [image.alt for image in images] == ["city skyline at night"]


def test_assign_unique_ids_rewrites_every_identifier() -> None:
    layout = SlideLayout.model_validate_json(layout_json())
    counter = itertools.count()

    assign_unique_ids(layout, 3, id_factory=lambda: f"u{next(counter)}")

    assert layout.id == "u0"
    assert layout.slide_order == 4
    assert layout.content.id == "u0-content-u1"
    heading, column = layout.content.content
    assert heading.id == "u0-item-0-u2"
    assert column.id == "u0-item-1-u3"
    assert column.content[0].id == "u0-item-1-0-u4"
    assert column.content[1].id == "u0-item-1-1-u5"


def test_to_dict_uses_camel_case_keys() -> None:
    layout = assign_unique_ids(SlideLayout.model_validate_json(layout_json()), 0)

    data = layout.to_dict()

    assert data["slideName"] == "Intro"
    assert data["slideOrder"] == 1
    assert data["className"] == "p-10"
    assert data["type"] == "imageAndText"
    assert data["content"]["content"][1]["content"][0]["type"] == "image"


def test_image_placeholder_content_may_be_null() -> None:
    payload = layout_payload()
    payload["content"]["content"][1]["content"][0]["content"] = None

    layout = SlideLayout.model_validate(payload)

    image = find_image_items(layout.content)[0]
    assert image.content is None
    assert image.alt == "city skyline at night"
