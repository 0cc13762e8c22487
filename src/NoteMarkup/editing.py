"""Structural edits the editing surface performs on the tree.

These mirror the keyboard behaviour of the note editor: typing a markup
prefix at the start of a plain line turns it into the matching block, and
Enter inside a list item either continues the list or leaves it.
"""
from __future__ import annotations

import logging
import re

from .dialect import (
    BULLET_GLYPH,
    BULLET_MARKER,
    CHECKBOX_MARKER,
    CONTAINER_TAGS,
    LIST_MARKERS,
    NBSP,
    NUMBERED_MARKER,
    PLACEHOLDER_MARKER,
    heading_tag,
)
from .render import checkbox_line
from .tree import Element, Text, find, find_parent, text_content

logger = logging.getLogger(__name__)

_HEADING_SHORTCUT = re.compile(r"^(#{1,3}) (.*)$")
_CHECKED_SHORTCUT = re.compile(r"^- \[x\] (.*)$")
_UNCHECKED_SHORTCUT = re.compile(r"^- \[ \] (.*)$")
_BULLET_SHORTCUT = re.compile(r"^- (?!\[[ x]\])(.*)$")
_NUMBERED_SHORTCUT = re.compile(r"^(\d+)\. (.*)$")


def apply_shortcut(root: Element, line: Element) -> Element:
    """Convert a plain line starting with a markup prefix, in place.

    Returns the element now occupying the line's position.
    """
    if line.tag not in CONTAINER_TAGS or line.markers:
        return line
    replacement = _shortcut_block(text_content(line).replace(NBSP, " ").lstrip())
    if replacement is None:
        return line
    _replace(root, line, replacement)
    logger.debug("Converted line to %s %s", replacement.tag, replacement.markers)
    return replacement


def _shortcut_block(text: str) -> Element | None:
    match = _HEADING_SHORTCUT.match(text)
    if match:
        rest = match.group(2).strip()
        return Element(
            heading_tag(len(match.group(1))),
            children=[Text(rest)] if rest else [],
            markers=[PLACEHOLDER_MARKER],
        )
    match = _CHECKED_SHORTCUT.match(text)
    if match:
        return checkbox_line(True, match.group(1).strip())
    match = _UNCHECKED_SHORTCUT.match(text)
    if match:
        return checkbox_line(False, match.group(1).strip())
    match = _BULLET_SHORTCUT.match(text)
    if match:
        return _bullet_line(match.group(1).strip())
    match = _NUMBERED_SHORTCUT.match(text)
    if match:
        rest = match.group(2).strip()
        return Element("div", children=[Text(rest)] if rest else [], markers=[NUMBERED_MARKER])
    return None


def continue_list(root: Element, item: Element) -> Element:
    """Handle Enter inside a list item and return the line that gets the caret.

    An empty item is turned into a plain empty line; otherwise a new empty
    item of the same kind is inserted right after it.
    """
    marker = next((m for m in item.markers if m in LIST_MARKERS), None)
    if marker is None:
        raise ValueError(f"Not a list item: <{item.tag}> {item.markers}")

    if not _item_text(item):
        empty_line = Element("div", children=[Element("br")])
        _replace(root, item, empty_line)
        return empty_line

    if marker == BULLET_MARKER:
        new_item = _bullet_line("")
    elif marker == CHECKBOX_MARKER:
        new_item = checkbox_line(False, "")
    else:
        new_item = Element("div", markers=[NUMBERED_MARKER])
    parent = _parent_of(root, item)
    parent.children.insert(_index_of(parent, item) + 1, new_item)
    return new_item


def toggle_checkbox(item: Element) -> bool:
    """Flip a checkbox item's control and return the new state."""
    control = find(item, lambda node: node.tag == "input")
    if control is None:
        raise ValueError("Checkbox item has no control")
    control.checked = not control.checked
    return control.checked


def _bullet_line(text: str) -> Element:
    return Element("div", children=[Text(f"{BULLET_GLYPH} {text}")], markers=[BULLET_MARKER])


def _item_text(item: Element) -> str:
    return text_content(item).replace(NBSP, " ").strip().lstrip(BULLET_GLYPH).strip()


def _parent_of(root: Element, node: Element) -> Element:
    parent = find_parent(root, node)
    if parent is None:
        raise ValueError(f"<{node.tag}> is not part of the tree")
    return parent


def _replace(root: Element, old: Element, new: Element) -> None:
    parent = _parent_of(root, old)
    parent.children[_index_of(parent, old)] = new


def _index_of(parent: Element, node: Element) -> int:
    return next(i for i, child in enumerate(parent.children) if child is node)
