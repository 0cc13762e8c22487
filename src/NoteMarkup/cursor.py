"""Character offsets across an editor tree.

Used to put the caret back where it was after the editable tree has been
rebuilt from markup. Offsets count the characters of text nodes in document
order; positions that cannot be resolved fall back to the end of content.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .tree import Element, Node, Text, iter_text_nodes

logger = logging.getLogger(__name__)


@dataclass
class Position:
    node: Node
    offset: int


def text_offset_of(root: Element, node: Text, local_offset: int) -> int:
    """Global offset of ``local_offset`` inside text node ``node``."""
    total = 0
    for text_node in iter_text_nodes(root):
        if text_node is node:
            return total + min(max(0, local_offset), len(text_node.text))
        total += len(text_node.text)
    logger.debug("Text node not found in tree, using end of content (%d)", total)
    return total


def locate(root: Element, offset: int) -> Position:
    """Text node and local offset holding global ``offset``."""
    if offset >= 0:
        remaining = offset
        for text_node in iter_text_nodes(root):
            if remaining <= len(text_node.text):
                return Position(text_node, remaining)
            remaining -= len(text_node.text)
    logger.debug("Offset %d out of bounds, using end of content", offset)
    return end_of_content(root)


def end_of_content(root: Element) -> Position:
    last: Text | None = None
    for text_node in iter_text_nodes(root):
        last = text_node
    if last is None:
        return Position(root, len(root.children))
    return Position(last, len(last.text))


def restore_cursor(old_root: Element, node: Text, local_offset: int, new_root: Element) -> Position:
    return locate(new_root, text_offset_of(old_root, node, local_offset))
