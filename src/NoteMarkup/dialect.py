from __future__ import annotations

import re

MAX_HEADING_LEVEL = 3

BOLD = "bold"
ITALIC = "italic"
UNDERLINE = "underline"

# Markup delimiters written by the serializer for each inline style.
INLINE_DELIMITERS = {
    BOLD: "**",
    ITALIC: "*",
    UNDERLINE: "__",
}

BULLET_PREFIX = "- "
CHECKED_PREFIX = "- [x] "
UNCHECKED_PREFIX = "- [ ] "
BULLET_GLYPH = "•"
NBSP = "\u00a0"

BULLET_MARKER = "bullet-item"
CHECKBOX_MARKER = "checkbox-item"
NUMBERED_MARKER = "numbered-item"
PLACEHOLDER_MARKER = "heading-placeholder"

STRUCTURAL_MARKERS = (BULLET_MARKER, CHECKBOX_MARKER, NUMBERED_MARKER, PLACEHOLDER_MARKER)
LIST_MARKERS = (BULLET_MARKER, CHECKBOX_MARKER, NUMBERED_MARKER)

HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3}
CONTAINER_TAGS = {"p", "div"}
BLOCK_TAGS = set(HEADING_TAGS) | CONTAINER_TAGS
STYLE_TAGS = {
    "strong": BOLD,
    "b": BOLD,
    "em": ITALIC,
    "i": ITALIC,
    "u": UNDERLINE,
}
VOID_TAGS = {"br", "input"}

HEADING_RE = re.compile(r"^(#{1,3}) (.+)$")
CHECKED_RE = re.compile(r"^- \[x\] (.+)$")
UNCHECKED_RE = re.compile(r"^- \[ \] (.+)$")
BULLET_RE = re.compile(r"^- (?!\[[ x]\])(.+)$")
NUMBERED_RE = re.compile(r"^(\d+)\. (.+)$")
TITLE_RE = re.compile(r"^# (.+)$")

# Order matters: longer marker combinations are tried first.
GLUED_HEADING_PAIRS = ((3, 2), (2, 3), (2, 1), (1, 2), (1, 3), (3, 1))


def heading_tag(level: int) -> str:
    level = min(max(1, level), MAX_HEADING_LEVEL)
    return f"h{level}"


def heading_prefix(level: int) -> str:
    return "#" * level + " "
