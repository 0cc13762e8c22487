from NoteMarkup.cursor import end_of_content, locate, restore_cursor, text_offset_of
from NoteMarkup.markdown_parser import parse_markup
from NoteMarkup.render import render_document
from NoteMarkup.tree import Element, Text


def _tree():
    hello = Text("Hello ")
    world = Text("world")
    tail = Text("next")
    root = Element(
        "div",
        children=[
            Element("p", children=[hello, Element("strong", children=[world])]),
            Element("p", children=[tail]),
        ],
    )
    return root, hello, world, tail


def test_offsets_count_text_in_document_order():
    root, hello, world, tail = _tree()
    assert text_offset_of(root, hello, 0) == 0
    assert text_offset_of(root, world, 2) == 8
    assert text_offset_of(root, tail, 4) == 15
    # Local offsets are clamped to the node.
    assert text_offset_of(root, world, 99) == 11


def test_locate_finds_node_and_local_offset():
    root, hello, world, tail = _tree()
    position = locate(root, 8)
    assert position.node is world and position.offset == 2
    position = locate(root, 12)
    assert position.node is tail and position.offset == 1


def test_out_of_bounds_falls_back_to_end():
    root, _, _, tail = _tree()
    for offset in (100, -1):
        position = locate(root, offset)
        assert position.node is tail and position.offset == 4
    assert text_offset_of(root, Text("stray"), 3) == 15


def test_empty_tree_end_position():
    root = Element("div")
    position = end_of_content(root)
    assert position.node is root and position.offset == 0
    assert locate(root, 3).node is root


def test_restore_cursor_after_reload():
    old_root = render_document(parse_markup("Hello **world**\nnext"))
    old_world = old_root.children[0].children[1].children[0]
    new_root = render_document(parse_markup("Hello **world**\nnext"))
    position = restore_cursor(old_root, old_world, 3, new_root)
    assert position.node is new_root.children[0].children[1].children[0]
    assert position.offset == 3
