"""
Slide layout data models
"""

import uuid
from enum import Enum
from typing import Annotated, Callable, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Content item type tags"""
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    TITLE = "title"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    RESIZABLE_COLUMN = "resizable-column"
    IMAGE = "image"
    BLOCKQUOTE = "blockquote"
    NUMBERED_LIST = "numberedList"
    BULLET_LIST = "bulletList"
    TODO_LIST = "todoList"
    CALLOUT_BOX = "calloutBox"
    CODE_BLOCK = "codeBlock"
    TABLE_OF_CONTENTS = "tableOfContents"
    DIVIDER = "divider"
    COLUMN = "column"


class LayoutType(str, Enum):
    """Slide layout type tags"""
    ACCENT_LEFT = "accentLeft"
    ACCENT_RIGHT = "accentRight"
    IMAGE_AND_TEXT = "imageAndText"
    TEXT_AND_IMAGE = "textAndImage"
    TWO_COLUMNS = "twoColumns"
    TWO_COLUMNS_WITH_HEADINGS = "twoColumnsWithHeadings"
    THREE_COLUMNS = "threeColumns"
    THREE_COLUMNS_WITH_HEADINGS = "threeColumnsWithHeadings"
    FOUR_COLUMNS = "fourColumns"
    TWO_IMAGE_COLUMNS = "twoImageColumns"
    THREE_IMAGE_COLUMNS = "threeImageColumns"
    FOUR_IMAGE_COLUMNS = "fourImageColumns"
    TABLE_LAYOUT = "tableLayout"


DEFAULT_SLIDE_CLASS = "min-h-[300px]"


class _ContentBase(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = ""
    name: str = ""
    placeholder: Optional[str] = None


class TextItem(_ContentBase):
    """Leaf item whose content is a single string"""
    type: Literal[
        "heading1", "heading2", "heading3", "heading4", "title", "paragraph",
        "blockquote", "calloutBox", "codeBlock", "divider",
    ]
    content: str = ""


class ListItem(_ContentBase):
    """Leaf item whose content is an ordered list of strings"""
    type: Literal["numberedList", "bulletList", "todoList", "tableOfContents"]
    content: List[str] = Field(default_factory=list)


class TableItem(_ContentBase):
    """Table rows, each a list of cell strings"""
    type: Literal["table"]
    content: List[List[str]] = Field(default_factory=list)


class ImageItem(_ContentBase):
    """Image placeholder; content holds the image URL"""
    type: Literal["image"]
    content: Optional[str] = None
    alt: Optional[str] = None


class ContainerItem(_ContentBase):
    """Item holding an ordered sequence of child items"""
    type: Literal["column", "resizable-column"]
    content: List["ContentItem"] = Field(default_factory=list)


ContentItem = Annotated[
    Union[TextItem, ListItem, TableItem, ImageItem, ContainerItem],
    Field(discriminator="type"),
]

ContainerItem.model_rebuild()


class SlideLayout(BaseModel):
    """One generated slide"""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = ""
    slide_name: str = Field(alias="slideName")
    type: LayoutType
    slide_order: int = Field(default=0, alias="slideOrder")
    class_name: str = Field(default=DEFAULT_SLIDE_CLASS, alias="className")
    content: ContentItem

    def to_dict(self) -> dict:
        """Wire/storage representation with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def iter_content_items(item) -> Iterator[_ContentBase]:
    """Depth-first walk over an item and all of its descendants"""
    yield item
    if isinstance(item, ContainerItem):
        for child in item.content:
            yield from iter_content_items(child)


def find_image_items(item) -> List[ImageItem]:
    return [node for node in iter_content_items(item) if isinstance(node, ImageItem)]


def _new_id() -> str:
    return str(uuid.uuid4())


def assign_unique_ids(
    layout: SlideLayout,
    index: int,
    id_factory: Callable[[], str] = _new_id
) -> SlideLayout:
    """
    Overwrite every identifier in the layout.

    The slide gets a fresh id and slide_order = index + 1. The root content
    item becomes ``<slide>-content-<uuid>`` and each nested item
    ``<slide>-item-<path>-<uuid>``, where ``path`` is its dash-joined
    positional index in the tree.
    """
    slide_id = id_factory()
    layout.id = slide_id
    layout.slide_order = index + 1
    layout.content.id = f"{slide_id}-content-{id_factory()}"

    def _assign(children, prefix: str):
        for position, child in enumerate(children):
            path = f"{prefix}-{position}" if prefix else str(position)
            child.id = f"{slide_id}-item-{path}-{id_factory()}"
            if isinstance(child, ContainerItem):
                _assign(child.content, path)

    if isinstance(layout.content, ContainerItem):
        _assign(layout.content.content, "")
    return layout
