from __future__ import annotations

from typing import Iterable, List

from .dialect import (
    BULLET_GLYPH,
    BULLET_MARKER,
    CHECKBOX_MARKER,
    NUMBERED_MARKER,
    PLACEHOLDER_MARKER,
    STYLE_TAGS,
    heading_tag,
)
from .model import (
    BlankLine,
    Block,
    BulletItem,
    CheckboxItem,
    Document,
    Heading,
    InlineElement,
    InlineSpan,
    InlineText,
    NumberedItem,
    Paragraph,
)
from .tree import Element, Node, Text

# First tag registered for each style wins.
_STYLE_TAG = {}
for _tag, _style in STYLE_TAGS.items():
    _STYLE_TAG.setdefault(_style, _tag)


def render_document(doc: Document) -> Element:
    """Build the editable tree for a parsed note body."""
    root = Element("div")
    for block in doc.blocks:
        root.children.append(_dispatch_block(block))
    return root


def _dispatch_block(block: Block) -> Element:
    if isinstance(block, Heading):
        return Element(
            heading_tag(block.level),
            children=render_inline(block.inline),
            markers=[PLACEHOLDER_MARKER],
        )
    if isinstance(block, Paragraph):
        return Element("p", children=render_inline(block.inline))
    if isinstance(block, BulletItem):
        return Element("div", children=[Text(f"{BULLET_GLYPH} {block.text}")], markers=[BULLET_MARKER])
    if isinstance(block, CheckboxItem):
        return checkbox_line(block.checked, block.text)
    if isinstance(block, NumberedItem):
        return Element(
            "div",
            children=[Text(block.text)],
            markers=[NUMBERED_MARKER],
            attrs={"data-index": str(block.index)},
        )
    if isinstance(block, BlankLine):
        return Element("p")
    raise TypeError(f"Unsupported block: {type(block).__name__}")


def checkbox_line(checked: bool, text: str) -> Element:
    return Element(
        "div",
        children=[
            Element("input", attrs={"type": "checkbox"}, checked=checked),
            Text(" "),
            Element("span", children=[Text(text)] if text else []),
        ],
        markers=[CHECKBOX_MARKER],
    )


def render_inline(elements: Iterable[InlineElement]) -> List[Node]:
    nodes: List[Node] = []
    for element in elements:
        if isinstance(element, InlineText):
            nodes.append(Text(element.text))
        elif isinstance(element, InlineSpan):
            nodes.append(Element(_STYLE_TAG[element.style], children=render_inline(element.children)))
    return nodes
