from __future__ import annotations

from typing import Any, List

import yaml

from .dialect import BOLD, ITALIC, UNDERLINE
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
from .tree import Element, Node, Text

_STYLES = (BOLD, ITALIC, UNDERLINE)


def dump_document(doc: Document, title: str = "") -> str:
    """Serialize a block Document to YAML as a ``title`` + ``body`` mapping."""
    data = {"title": title, "body": [_block_to_data(block) for block in doc.blocks]}
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def load_document(text: str) -> tuple[str, Document]:
    """Parse the YAML written by :func:`dump_document`."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping with 'title' and 'body'.")
    body = data.get("body") or []
    if not isinstance(body, list):
        raise ValueError("'body' must be a list of blocks.")
    return str(data.get("title") or ""), Document(blocks=[_block_from_data(entry) for entry in body])


def dump_tree(tree: Element, title: str = "") -> str:
    data = {"title": title, "tree": _node_to_data(tree)}
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def load_tree(text: str) -> tuple[str, Element]:
    """Parse an editor tree described in YAML.

    A node is either a string (a text node) or a mapping with ``tag`` and
    optional ``children``, ``markers``, ``attrs`` and ``checked``.
    """
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping with 'title' and 'tree'.")
    root = _node_from_data(data.get("tree") or {"tag": "div"})
    if not isinstance(root, Element):
        raise ValueError("'tree' must be an element mapping.")
    return str(data.get("title") or ""), root


def _block_to_data(block: Block) -> dict[str, Any]:
    if isinstance(block, Heading):
        return {"heading": _inline_to_data(block.inline), "level": block.level}
    if isinstance(block, Paragraph):
        return {"paragraph": _inline_to_data(block.inline)}
    if isinstance(block, BulletItem):
        return {"bullet": block.text}
    if isinstance(block, CheckboxItem):
        return {"checkbox": block.text, "checked": block.checked}
    if isinstance(block, NumberedItem):
        return {"numbered": block.text, "index": block.index}
    if isinstance(block, BlankLine):
        return {"blank": True}
    raise TypeError(f"Unsupported block: {type(block).__name__}")


def _block_from_data(entry) -> Block:
    if not isinstance(entry, dict):
        raise ValueError(f"Block entries must be mappings, got {entry!r}")
    if "heading" in entry:
        return Heading(level=int(entry.get("level", 1)), inline=_inline_from_data(entry["heading"]))
    if "paragraph" in entry:
        return Paragraph(inline=_inline_from_data(entry["paragraph"]))
    if "bullet" in entry:
        return BulletItem(text=str(entry["bullet"]))
    if "checkbox" in entry:
        return CheckboxItem(checked=bool(entry.get("checked", False)), text=str(entry["checkbox"]))
    if "numbered" in entry:
        return NumberedItem(index=int(entry.get("index", 1)), text=str(entry["numbered"]))
    if "blank" in entry:
        return BlankLine()
    raise ValueError(f"Unknown block entry: {sorted(entry)}")


def _inline_to_data(elements: List[InlineElement]) -> list:
    data: list = []
    for element in elements:
        if isinstance(element, InlineText):
            data.append(element.text)
        elif isinstance(element, InlineSpan):
            data.append({element.style: _inline_to_data(element.children)})
    return data


def _inline_from_data(value) -> List[InlineElement]:
    if isinstance(value, str):
        return [InlineText(value)]
    elements: List[InlineElement] = []
    for item in value or []:
        if isinstance(item, str):
            elements.append(InlineText(item))
        elif isinstance(item, dict) and len(item) == 1 and next(iter(item)) in _STYLES:
            style, children = next(iter(item.items()))
            elements.append(InlineSpan(style=style, children=_inline_from_data(children)))
        else:
            raise ValueError(f"Invalid inline entry: {item!r}")
    return elements


def _node_to_data(node: Node):
    if isinstance(node, Text):
        return node.text
    data: dict[str, Any] = {"tag": node.tag}
    if node.markers:
        data["markers"] = list(node.markers)
    if node.attrs:
        data["attrs"] = dict(node.attrs)
    if node.checked:
        data["checked"] = True
    if node.children:
        data["children"] = [_node_to_data(child) for child in node.children]
    return data


def _node_from_data(value) -> Node:
    if isinstance(value, str):
        return Text(value)
    if not isinstance(value, dict) or "tag" not in value:
        raise ValueError(f"Tree nodes must be strings or mappings with a 'tag', got {value!r}")
    children = value.get("children") or []
    if not isinstance(children, list):
        raise ValueError(f"'children' of <{value['tag']}> must be a list")
    return Element(
        str(value["tag"]),
        children=[_node_from_data(child) for child in children],
        markers=[str(marker) for marker in value.get("markers") or []],
        attrs={str(k): str(v) for k, v in (value.get("attrs") or {}).items()},
        checked=bool(value.get("checked", False)),
    )
