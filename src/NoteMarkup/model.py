from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .dialect import BOLD, ITALIC, UNDERLINE


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)
    metadata: dict[str, Any] | None = None


@dataclass
class InlineElement:
    """Base class for inline nodes."""


@dataclass
class InlineText(InlineElement):
    text: str


@dataclass
class InlineSpan(InlineElement):
    style: str
    children: List[InlineElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.style not in (BOLD, ITALIC, UNDERLINE):
            raise ValueError(f"Unknown inline style: {self.style!r}")


@dataclass
class Heading(Block):
    level: int
    inline: List[InlineElement] = field(default_factory=list)

    @property
    def text(self) -> str:
        return plain_text(self.inline)

    @property
    def is_placeholder(self) -> bool:
        """Empty headings only exist as editor affordances."""
        return not self.text.strip()


@dataclass
class Paragraph(Block):
    inline: List[InlineElement] = field(default_factory=list)


@dataclass
class BulletItem(Block):
    text: str


@dataclass
class CheckboxItem(Block):
    checked: bool
    text: str


@dataclass
class NumberedItem(Block):
    index: int
    text: str


@dataclass
class BlankLine(Block):
    """Intentional empty paragraph."""


def plain_text(inline: List[InlineElement]) -> str:
    parts: list[str] = []
    for element in inline:
        if isinstance(element, InlineText):
            parts.append(element.text)
        elif isinstance(element, InlineSpan):
            parts.append(plain_text(element.children))
    return "".join(parts)
