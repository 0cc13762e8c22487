from NoteMarkup.normalizer import normalize
from NoteMarkup.tree import Element, Text


def _messy_tree() -> Element:
    return Element(
        "div",
        children=[
            Element(
                "h1",
                markers=["heading-placeholder", "text-2xl"],
                attrs={"class": "text-2xl font-bold"},
                children=[
                    Text("Title"),
                    Element("div", children=[Text("inner")]),
                    Element("h2", children=[Text("Sub")]),
                    Text(" tail "),
                ],
            ),
            Element(
                "div",
                markers=["bullet-item", "fancy"],
                attrs={"style": "color: red"},
                children=[Text("• item")],
            ),
        ],
    )


def test_headings_with_block_children_are_flattened():
    root = normalize(_messy_tree())
    assert root.children[:4] == [
        Element("h1", children=[Text("Title")], markers=["heading-placeholder"]),
        Element("div", children=[Text("inner")]),
        Element("h2", children=[Text("Sub")]),
        Element("div", children=[Text(" tail ")]),
    ]


def test_attributes_and_markers_are_stripped():
    bullet = normalize(_messy_tree()).children[4]
    assert bullet == Element("div", children=[Text("• item")], markers=["bullet-item"])


def test_heading_without_leading_text_is_dropped():
    tree = Element("div", children=[Element("h2", children=[Text("  "), Element("p", children=[Text("x")])])])
    assert normalize(tree).children == [Element("p", children=[Text("x")])]


def test_nested_headings_flatten_fully():
    tree = Element(
        "div",
        children=[
            Element(
                "h1",
                children=[
                    Text("A"),
                    Element("h2", children=[Text("B"), Element("div", children=[Text("C")])]),
                ],
            )
        ],
    )
    assert normalize(tree).children == [
        Element("h1", children=[Text("A")]),
        Element("h2", children=[Text("B")]),
        Element("div", children=[Text("C")]),
    ]


def test_inline_children_keep_heading_intact():
    heading = Element("h3", children=[Text("a "), Element("strong", attrs={"style": "x"}, children=[Text("b")])])
    root = normalize(Element("div", children=[heading]))
    assert root.children == [Element("h3", children=[Text("a "), Element("strong", children=[Text("b")])])]


def test_nbsp_replaced_everywhere():
    tree = Element("div", children=[Element("p", children=[Element("em", children=[Text("a\u00a0b\u00a0")])])])
    assert normalize(tree).children[0].children[0].children[0] == Text("a b ")


def test_unknown_tags_pass_through_and_checked_survives():
    tree = Element(
        "div",
        children=[
            Element("custom-widget", attrs={"data-x": "1"}, children=[Text("z")]),
            Element("input", attrs={"type": "checkbox"}, checked=True),
        ],
    )
    assert normalize(tree).children == [
        Element("custom-widget", children=[Text("z")]),
        Element("input", checked=True),
    ]


def test_normalize_is_idempotent_and_pure():
    messy = _messy_tree()
    once = normalize(messy)
    assert normalize(once) == once
    assert messy.children[1].attrs == {"style": "color: red"}
