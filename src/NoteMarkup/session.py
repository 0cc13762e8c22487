from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from . import codec
from .markdown_parser import parse_markup
from .model import Document
from .normalizer import normalize
from .render import render_document
from .serializer import serialize
from .tree import Element

logger = logging.getLogger(__name__)


class FlushReason(str, Enum):
    SAVE = "save"
    BLUR = "blur"
    VISIBILITY_HIDDEN = "visibility_hidden"
    BEFORE_UNLOAD = "before_unload"
    SHORTCUT = "shortcut"
    NAVIGATION = "navigation"


def load_note(persisted: str) -> tuple[str, Document]:
    """Load path: persisted string to (title, block Document)."""
    parts = codec.split(persisted)
    document = parse_markup(parts.body)
    document.metadata = {"title": parts.title}
    return parts.title, document


def save_note(title: str, tree: Element) -> str:
    """Save path: edited tree and title to the persisted string."""
    return codec.combine(title, serialize(normalize(tree)))


@dataclass
class EditingSession:
    """One note open in the editing surface.

    Holds the title field, the editable tree and the last persisted form so
    that repeated flushes of unchanged content are no-ops.
    """

    title: str = ""
    tree: Element = field(default_factory=lambda: Element("div"))
    saved: str = ""

    @classmethod
    def load(cls, persisted: str) -> "EditingSession":
        title, document = load_note(persisted)
        session = cls(title=title, tree=render_document(document))
        # The baseline is the canonical form so that a load that only
        # normalises layout does not count as a change.
        session.saved = session.snapshot()
        return session

    def snapshot(self) -> str:
        return save_note(self.title, self.tree)

    @property
    def has_changes(self) -> bool:
        return self.snapshot() != self.saved

    def flush(self, reason: FlushReason = FlushReason.SAVE) -> str | None:
        """Return the new persisted content if it changed since the last flush."""
        content = self.snapshot()
        if content == self.saved:
            logger.debug("Flush (%s): no changes", reason.value)
            return None
        logger.debug("Flush (%s): %d chars", reason.value, len(content))
        self.saved = content
        return content
