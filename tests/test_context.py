"""Tests for the bookmark context digest sent with AI searches."""

from bookmind.prompts import build_context


def test_full_line_has_every_segment(make_bookmark):
    """Title, description, tags and URL appear in that order."""
    b = make_bookmark(
        title="Intro to Rust",
        url="https://rust.example",
        excerpt="Ownership explained",
        tags=["rust", "systems"],
    )

    assert build_context([b], 10) == (
        "Title: Intro to Rust | Description: Ownership explained"
        " | Tags: rust, systems | URL: https://rust.example"
    )


def test_missing_fields_are_omitted(make_bookmark):
    """Empty excerpt and tags drop their segments; URL is always present."""
    b = make_bookmark(title="Bare", url="https://bare.example", excerpt="", tags=[])

    assert build_context([b], 10) == "Title: Bare | URL: https://bare.example"


def test_description_capped_at_150_chars(make_bookmark):
    b = make_bookmark(title="Long", excerpt="x" * 400)

    line = build_context([b], 1)
    description = line.split(" | Description: ")[1].split(" | ")[0]

    assert len(description) == 150


def test_limit_keeps_caller_order(make_bookmark):
    """Only the first `limit` bookmarks are used and their order is kept."""
    bookmarks = [make_bookmark(title=f"B{i}") for i in range(5)]

    lines = build_context(bookmarks, 3).split("\n")

    assert [line.split(" | ")[0] for line in lines] == ["Title: B0", "Title: B1", "Title: B2"]


def test_line_count_never_exceeds_limit_or_input(make_bookmark):
    bookmarks = [make_bookmark(title=f"B{i}") for i in range(4)]

    for limit in (0, 1, 4, 10):
        text = build_context(bookmarks, limit)
        lines = text.split("\n") if text else []
        assert len(lines) <= min(limit, len(bookmarks))


def test_empty_collection_gives_empty_digest():
    assert build_context([], 50) == ""
