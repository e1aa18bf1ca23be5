"""Tests for Markdown parsing."""

from __future__ import annotations

from changelog_tools.parser import build_markdown, parse_md


def test_parse_simple_text_into_paragraph() -> None:
    tree = parse_md("Hello, world!")
    assert tree.type == "root"
    (paragraph,) = tree.children
    assert paragraph.type == "paragraph"
    (inline,) = paragraph.children
    (text,) = inline.children
    assert text.type == "text"
    assert text.content == "Hello, world!"


def test_parse_empty_string_has_no_children() -> None:
    tree = parse_md("")
    assert tree.type == "root"
    assert tree.children == []


def test_parse_heading_carries_depth_tag_and_inline_text() -> None:
    (heading,) = parse_md("## Version 1.0.0").children
    assert heading.type == "heading"
    assert heading.tag == "h2"
    (inline,) = heading.children
    assert [(child.type, child.content) for child in inline.children] == [
        ("text", "Version 1.0.0")
    ]


def test_parse_headings_and_paragraphs_in_document_order() -> None:
    md = (
        "# Main Title\n\nSome content here.\n\n"
        "## Section 1\n\nMore content.\n\n"
        "## Section 2\n\nEven more content."
    )
    tree = parse_md(md)
    assert [(child.type, child.tag) for child in tree.children] == [
        ("heading", "h1"),
        ("paragraph", "p"),
        ("heading", "h2"),
        ("paragraph", "p"),
        ("heading", "h2"),
        ("paragraph", "p"),
    ]


def test_parse_list_as_single_block() -> None:
    tree = parse_md("- Item 1\n- Item 2\n- Item 3")
    (block,) = tree.children
    assert block.type == "bullet_list"
    assert len(block.children) == 3


def test_parse_inline_link() -> None:
    (paragraph,) = parse_md("[Link text](https://example.com)").children
    (link,) = paragraph.children[0].children
    assert link.type == "link"
    assert link.attrs["href"] == "https://example.com"


def test_reference_links_resolve_to_direct_links() -> None:
    tree = parse_md("[Link text][ref]\n\n[ref]: https://example.com")
    (paragraph,) = tree.children
    (link,) = paragraph.children[0].children
    assert link.type == "link"
    assert link.attrs["href"] == "https://example.com"
    assert "label" not in link.meta


def test_reference_linked_version_heading_becomes_link() -> None:
    md = "## [1.0.0] - 2024-01-01\n\n[1.0.0]: https://example.com/v1.0.0"
    (heading,) = parse_md(md).children
    link, text = heading.children[0].children
    assert link.type == "link"
    assert link.children[0].content == "1.0.0"
    assert text.content == " - 2024-01-01"


def test_undefined_reference_stays_plain_text() -> None:
    (heading,) = parse_md("## [2.0.4] (prerelease)").children
    (text,) = heading.children[0].children
    assert text.type == "text"
    assert text.content == "[2.0.4] (prerelease)"


def test_build_markdown_is_cached_per_options() -> None:
    assert build_markdown() is build_markdown()
