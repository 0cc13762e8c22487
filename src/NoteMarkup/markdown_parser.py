from __future__ import annotations

import re
from typing import List

from markdown_it import MarkdownIt
from markdown_it.rules_inline import emphasis
from markdown_it.rules_inline.state_inline import StateInline

from .dialect import (
    BOLD,
    BULLET_RE,
    CHECKED_RE,
    GLUED_HEADING_PAIRS,
    HEADING_RE,
    ITALIC,
    NUMBERED_RE,
    UNCHECKED_RE,
    UNDERLINE,
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

# "__" strong runs are the dialect's underline.
_STRONG_STYLES = {"**": BOLD, "__": UNDERLINE}


def _build_glued_patterns() -> list[tuple[re.Pattern, int, int]]:
    patterns = []
    for first, second in GLUED_HEADING_PAIRS:
        pattern = re.compile(
            rf"^[ \t]*#{{{first}}}(?![# ])([^#\n]+)(?<!#)#{{{second}}}(?!#)([^#\n]+)$",
            re.MULTILINE,
        )
        patterns.append((pattern, first, second))
    return patterns


_GLUED_PATTERNS = _build_glued_patterns()


def _wrapped_emphasis(state: StateInline, silent: bool) -> bool:
    """Emphasis delimiters without CommonMark flanking rules.

    A run opens when followed by a non-space and closes when preceded by one,
    so spans written by plain wrapping (inside words, next to punctuation)
    parse back.
    """
    start = state.pos
    first = len(state.delimiters)
    if not emphasis.tokenize(state, silent):
        return False
    before = state.src[start - 1] if start > 0 else " "
    after = state.src[state.pos] if state.pos < state.posMax else " "
    for delimiter in state.delimiters[first:]:
        delimiter.open = not after.isspace()
        delimiter.close = not before.isspace()
    return True


_INLINE_MD = MarkdownIt("zero").enable(["emphasis"])
_INLINE_MD.inline.ruler.at("emphasis", _wrapped_emphasis)


def parse_markup(text: str) -> Document:
    """Parse note markup into a block Document."""
    if not text:
        return Document(blocks=[])
    repaired = repair_glued_headings(text.replace("\r\n", "\n"))
    blocks: List[Block] = []
    for line in repaired.split("\n"):
        block = _parse_line(line)
        if block is not None:
            blocks.append(block)
    return Document(blocks=blocks)


def repair_glued_headings(text: str) -> str:
    """Break lines such as ``###Sub##Main`` into one heading per line.

    The first marker must be glued to its text, so ``## Issue #5`` is kept.
    Only two markers per line are recognised.
    """
    for pattern, first, second in _GLUED_PATTERNS:
        text = pattern.sub(
            lambda m, a=first, b=second: (
                f"{'#' * a} {m.group(1).strip()}\n{'#' * b} {m.group(2).strip()}"
            ),
            text,
        )
    return text


def _parse_line(line: str) -> Block | None:
    stripped = line.strip()
    if not stripped:
        return BlankLine()

    match = HEADING_RE.match(stripped)
    if match and match.group(2).strip():
        return Heading(level=len(match.group(1)), inline=parse_inline(match.group(2).strip()))
    match = CHECKED_RE.match(stripped)
    if match:
        return CheckboxItem(checked=True, text=match.group(1).strip())
    match = UNCHECKED_RE.match(stripped)
    if match:
        return CheckboxItem(checked=False, text=match.group(1).strip())
    match = BULLET_RE.match(stripped)
    if match:
        return BulletItem(text=match.group(1).strip())
    match = NUMBERED_RE.match(stripped)
    if match and match.group(2).strip():
        return NumberedItem(index=int(match.group(1)), text=match.group(2).strip())
    return Paragraph(inline=parse_inline(stripped))


def parse_inline(text: str) -> List[InlineElement]:
    """Parse bold/italic/underline spans; unbalanced delimiters stay literal."""
    tokens = _INLINE_MD.parseInline(text)
    if not tokens:
        return []
    children = tokens[0].children or []
    elements, _ = _parse_inline_tokens(children, 0, closing=None)
    return elements


def _parse_inline_tokens(tokens: list, index: int, closing: str | None) -> tuple[List[InlineElement], int]:
    result: List[InlineElement] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if closing is not None and tok.type == closing:
            return result, i + 1
        if tok.type == "text":
            _append_text(result, tok.content)
            i += 1
        elif tok.type in ("strong_open", "em_open"):
            if tok.type == "strong_open":
                style = _STRONG_STYLES.get(tok.markup, BOLD)
                close_type = "strong_close"
            else:
                style = ITALIC
                close_type = "em_close"
            children, i = _parse_inline_tokens(tokens, i + 1, closing=close_type)
            result.append(InlineSpan(style=style, children=children))
        else:
            _append_text(result, tok.content or "")
            i += 1
    return result, i


def _append_text(result: List[InlineElement], text: str) -> None:
    if not text:
        return
    if result and isinstance(result[-1], InlineText):
        result[-1] = InlineText(result[-1].text + text)
    else:
        result.append(InlineText(text))
