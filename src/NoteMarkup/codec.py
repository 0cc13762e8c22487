from __future__ import annotations

import re
from dataclasses import dataclass

from .dialect import TITLE_RE

DISPLAY_TITLE_LIMIT = 50

_MARKUP_CLEANUPS = (
    (re.compile(r"^#+\s*"), ""),
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"__(.*?)__"), r"\1"),
    (re.compile(r"`(.*?)`"), r"\1"),
)


@dataclass(frozen=True)
class NoteParts:
    title: str
    body: str


def split(persisted: str) -> NoteParts:
    """Split a persisted note into its title heading and body."""
    if not persisted:
        return NoteParts(title="", body="")
    lines = persisted.split("\n")
    match = TITLE_RE.match(lines[0].rstrip())
    if not match:
        return NoteParts(title="", body=persisted)

    remainder = lines[1:]
    while remainder and not remainder[0].strip():
        remainder.pop(0)
    return NoteParts(title=match.group(1).strip(), body="\n".join(remainder).rstrip())


def combine(title: str, body: str) -> str:
    clean_title = title.strip()
    clean_body = body.strip()
    if not clean_title and not clean_body:
        return ""
    if not clean_title:
        return clean_body
    if not clean_body:
        return f"# {clean_title}"
    return f"# {clean_title}\n\n{clean_body}"


def display_title(persisted: str, limit: int = DISPLAY_TITLE_LIMIT) -> str:
    """Short label for note lists: the title, else the cleaned first body line."""
    parts = split(persisted)
    if parts.title:
        label = parts.title
    else:
        label = parts.body.strip().split("\n")[0].strip()
        for pattern, replacement in _MARKUP_CLEANUPS:
            label = pattern.sub(replacement, label)
    if len(label) > limit:
        return label[:limit] + "..."
    return label
