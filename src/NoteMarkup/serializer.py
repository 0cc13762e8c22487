from __future__ import annotations

import logging
import re
from typing import List

from .dialect import (
    BULLET_GLYPH,
    BULLET_MARKER,
    BULLET_PREFIX,
    CHECKBOX_MARKER,
    CHECKED_PREFIX,
    INLINE_DELIMITERS,
    NUMBERED_MARKER,
    STYLE_TAGS,
    UNCHECKED_PREFIX,
    VOID_TAGS,
    heading_prefix,
)
from .tree import Element, Node, Text, find, is_structural

logger = logging.getLogger(__name__)

_GLYPH_RE = re.compile(rf"^{re.escape(BULLET_GLYPH)}\s*")


def serialize(root: Element) -> str:
    """Serialize a canonical tree back to note markup."""
    lines = _serialize_children(root.children)
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def _serialize_children(children: List[Node]) -> List[str]:
    lines: List[str] = []
    inline_run: List[Node] = []
    number = 0

    def flush_inline() -> None:
        nonlocal number
        content = serialize_inline(inline_run).strip()
        inline_run.clear()
        if content:
            _append_line(lines, content)
            number = 0

    for child in children:
        if not is_structural(child):
            inline_run.append(child)
            continue
        flush_inline()
        if child.has_marker(NUMBERED_MARKER):
            content = serialize_inline(child.children).strip()
            if content:
                number += 1
                _append_line(lines, f"{number}. {content}")
            continue
        block_lines = _serialize_block(child)
        if any(block_lines):
            number = 0
        for line in block_lines:
            _append_line(lines, line)
    flush_inline()
    return lines


def _append_line(lines: List[str], line: str) -> None:
    # An empty string is an intentional blank line; runs collapse to one.
    if line == "" and lines and lines[-1] == "":
        return
    lines.append(line)


def _serialize_block(element: Element) -> List[str]:
    level = element.heading_level
    if level is not None:
        content = serialize_inline(element.children).strip()
        if not content:
            logger.debug("Dropping empty placeholder %s", element.tag)
            return []
        return [heading_prefix(level) + content]

    if element.has_marker(BULLET_MARKER):
        content = _GLYPH_RE.sub("", serialize_inline(element.children).strip()).strip()
        return [BULLET_PREFIX + content] if content else []

    if element.has_marker(CHECKBOX_MARKER):
        return _serialize_checkbox(element)

    if any(is_structural(child) for child in element.children):
        return [line for line in _serialize_children(element.children) if line.strip()]

    # Empty containers are intentional blank lines.
    return [serialize_inline(element.children).strip()]


def _serialize_checkbox(element: Element) -> List[str]:
    control = find(element, lambda node: node.tag == "input")
    checked = bool(control and control.checked)
    label = find(element, lambda node: node.tag in ("span", "label"))
    if label is not None:
        content = serialize_inline(label.children)
    else:
        content = serialize_inline(
            [child for child in element.children if not (isinstance(child, Element) and child.tag == "input")]
        )
    content = content.strip()
    if not content:
        return []
    prefix = CHECKED_PREFIX if checked else UNCHECKED_PREFIX
    return [prefix + content]


def serialize_inline(nodes: List[Node]) -> str:
    parts: List[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.text)
        elif isinstance(node, Element):
            if node.tag in VOID_TAGS:
                continue
            content = serialize_inline(node.children)
            style = STYLE_TAGS.get(node.tag)
            if style is not None:
                content = _wrap(content, INLINE_DELIMITERS[style])
            parts.append(content)
    return "".join(parts)


def _wrap(content: str, delimiter: str) -> str:
    core = content.strip()
    if not core:
        return content
    start = content.index(core)
    return f"{content[:start]}{delimiter}{core}{delimiter}{content[start + len(core):]}"
