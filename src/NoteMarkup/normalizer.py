from __future__ import annotations

import logging
from typing import List

from .dialect import NBSP, STRUCTURAL_MARKERS
from .tree import Element, Node, Text, is_heading, is_structural, text_content

logger = logging.getLogger(__name__)


def normalize(root: Element) -> Element:
    """Return a canonical copy of an edited tree, safe to serialize.

    Headings holding block content are split into sibling blocks, every
    attribute except the structural markers is dropped and non-breaking
    spaces become plain spaces. The input tree is left untouched.
    """
    return _normalize_element(root)


def _normalize_element(element: Element) -> Element:
    return Element(
        element.tag,
        children=_normalize_children(element.children),
        markers=[marker for marker in element.markers if marker in STRUCTURAL_MARKERS],
        checked=element.checked,
    )


def _normalize_children(children: List[Node]) -> List[Node]:
    result: List[Node] = []
    for child in children:
        if isinstance(child, Text):
            result.append(Text(child.text.replace(NBSP, " ")))
        elif isinstance(child, Element):
            clean = _normalize_element(child)
            if is_heading(clean) and any(is_structural(node) for node in clean.children):
                result.extend(_denest_heading(clean))
            else:
                result.append(clean)
    return result


def _denest_heading(heading: Element) -> List[Node]:
    index = 0
    while index < len(heading.children) and not is_structural(heading.children[index]):
        index += 1
    leading = heading.children[:index]

    blocks: List[Node] = []
    if _has_text(leading):
        blocks.append(Element(heading.tag, children=leading, markers=list(heading.markers)))

    loose: List[Node] = []
    for child in heading.children[index:]:
        if is_structural(child):
            _flush_loose(blocks, loose)
            loose = []
            blocks.append(child)
        else:
            loose.append(child)
    _flush_loose(blocks, loose)

    logger.debug("Split nested %s into %d blocks", heading.tag, len(blocks))
    return blocks


def _flush_loose(blocks: List[Node], loose: List[Node]) -> None:
    if _has_text(loose):
        blocks.append(Element("div", children=loose))


def _has_text(nodes: List[Node]) -> bool:
    return any(text_content(node).strip() for node in nodes)
