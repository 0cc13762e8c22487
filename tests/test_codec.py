from NoteMarkup import codec


def test_split_title_and_body():
    parts = codec.split("# Title\n\nBody line")
    assert parts.title == "Title"
    assert parts.body == "Body line"

    parts = codec.split("Body only")
    assert parts.title == ""
    assert parts.body == "Body only"


def test_split_edge_cases():
    assert codec.split("") == codec.NoteParts("", "")
    assert codec.split("# Title") == codec.NoteParts("Title", "")
    assert codec.split("# Title\n\n\n\nfirst\n\nsecond") == codec.NoteParts("Title", "first\n\nsecond")
    assert codec.split("#NoSpace\nbody") == codec.NoteParts("", "#NoSpace\nbody")
    assert codec.split("## Section\nbody") == codec.NoteParts("", "## Section\nbody")
    assert codec.split("  # Indented\nbody") == codec.NoteParts("", "  # Indented\nbody")
    assert codec.split("# Title  \nbody") == codec.NoteParts("Title", "body")


def test_combine_layouts():
    assert codec.combine("  ", "\n") == ""
    assert codec.combine("", " body ") == "body"
    assert codec.combine(" Title ", "") == "# Title"
    assert codec.combine("Title", "\nbody\n") == "# Title\n\nbody"


def test_combine_is_left_inverse_of_split():
    for title, body in [
        ("Title", "line 1\n\nline 3"),
        ("", "plain text"),
        ("Only title", ""),
        ("T", "# Not a title\ntext"),
        ("", "# Looks like a title\n\nbody"),
    ]:
        persisted = codec.combine(title, body)
        parts = codec.split(persisted)
        assert codec.combine(parts.title, parts.body) == persisted


def test_display_title():
    assert codec.display_title("# Weekly plan\n\n- a") == "Weekly plan"
    assert codec.display_title("**Bold** and *soft* start\nmore") == "Bold and soft start"
    assert codec.display_title("## Heading text") == "Heading text"
    long_title = "x" * 60
    assert codec.display_title(f"# {long_title}") == "x" * 50 + "..."
    assert codec.display_title("") == ""
