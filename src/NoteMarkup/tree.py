"""Editable document tree.

A small, language-neutral stand-in for the editing surface's document:
elements carry a tag, structural markers, presentation attributes and
children; text nodes carry text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .dialect import BLOCK_TAGS, HEADING_TAGS, STRUCTURAL_MARKERS


@dataclass
class Node:
    """Base class for editor tree nodes."""


@dataclass
class Text(Node):
    text: str


@dataclass
class Element(Node):
    tag: str
    children: List[Node] = field(default_factory=list)
    markers: List[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    checked: bool = False

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers

    @property
    def heading_level(self) -> int | None:
        return HEADING_TAGS.get(self.tag)


def is_heading(node: Node) -> bool:
    return isinstance(node, Element) and node.tag in HEADING_TAGS


def is_structural(node: Node) -> bool:
    """Block-level nodes: block tags or anything carrying a structural marker."""
    if not isinstance(node, Element):
        return False
    if node.tag in BLOCK_TAGS:
        return True
    return any(marker in STRUCTURAL_MARKERS for marker in node.markers)


def text_content(node: Node) -> str:
    if isinstance(node, Text):
        return node.text
    if isinstance(node, Element):
        return "".join(text_content(child) for child in node.children)
    return ""


def iter_text_nodes(node: Node) -> Iterator[Text]:
    """Yield text nodes in document order."""
    if isinstance(node, Text):
        yield node
    elif isinstance(node, Element):
        for child in node.children:
            yield from iter_text_nodes(child)


def find(node: Node, predicate) -> Element | None:
    """Depth-first search for the first element matching ``predicate``."""
    if isinstance(node, Element):
        if predicate(node):
            return node
        for child in node.children:
            found = find(child, predicate)
            if found is not None:
                return found
    return None


def find_parent(root: Element, target: Node) -> Element | None:
    for child in root.children:
        if child is target:
            return root
        if isinstance(child, Element):
            parent = find_parent(child, target)
            if parent is not None:
                return parent
    return None
