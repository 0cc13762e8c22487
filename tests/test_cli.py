import textwrap
from pathlib import Path

import pytest
import yaml

from NoteMarkup import cli, yaml_io
from NoteMarkup.markdown_parser import parse_markup

NOTE = textwrap.dedent(
    """
    # Title

    Some **bold** text
    - [x] done
    1. step
    """
).lstrip()


def test_parse_writes_blocks_yaml(tmp_path: Path):
    note = tmp_path / "note.md"
    note.write_text(NOTE, encoding="utf-8")
    cli.main(["parse", str(note)])

    data = yaml.safe_load((tmp_path / "note.yaml").read_text(encoding="utf-8"))
    assert data["title"] == "Title"
    assert data["body"] == [
        {"paragraph": ["Some ", {"bold": ["bold"]}, " text"]},
        {"checkbox": "done", "checked": True},
        {"numbered": "step", "index": 1},
    ]


def test_tree_round_trip_through_save(tmp_path: Path):
    note = tmp_path / "note.md"
    note.write_text(NOTE, encoding="utf-8")
    tree_file = tmp_path / "tree.yaml"
    out = tmp_path / "out" / "saved.md"

    cli.main(["parse", str(note), "--tree", "-o", str(tree_file)])
    cli.main(["save", str(tree_file), "-o", str(out)])
    assert out.read_text(encoding="utf-8") == NOTE

    cli.main(["--verbose", "save", str(tree_file), "-o", str(out), "--title", "Other"])
    assert out.read_text(encoding="utf-8").startswith("# Other\n\nSome **bold** text")


def test_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main(["parse", str(tmp_path / "missing.md")])


def test_document_yaml_is_readable_back():
    document = parse_markup("## Head *it*\n- a\n\n- [ ] b")
    title, loaded = yaml_io.load_document(yaml_io.dump_document(document, title="T"))
    assert title == "T"
    assert loaded == document


def test_tree_yaml_validation():
    with pytest.raises(ValueError):
        yaml_io.load_tree("- not\n- a mapping\n")
    with pytest.raises(ValueError):
        yaml_io.load_tree("tree:\n  children: [x]\n")
    title, root = yaml_io.load_tree("tree:\n  tag: div\n  children:\n    - tag: p\n      children: [hi]\n")
    assert title == ""
    assert root.children[0].children[0].text == "hi"
