"""Tests for indentation and markdown folding."""

from bulletnote.document import Document, Span
from bulletnote.folding import IndentFolding, MarkdownFolding, indent_width

NESTED = "- a\n  - b\n    - c\n- d"


def _fold(folding, doc, number):
    line = doc.line(number)
    return folding.foldable(doc, line.start, line.end)


def test_indent_width():
    assert indent_width("text") == 0
    assert indent_width("  text") == 2
    assert indent_width("\ttext") == 4
    assert indent_width("  \ttext") == 4
    assert indent_width("\t  text", tab_size=2) == 4


def test_indent_folds_nested_block():
    doc = Document(NESTED)
    assert _fold(IndentFolding(), doc, 0) == Span(3, 17)


def test_indent_folds_inner_item():
    doc = Document(NESTED)
    assert _fold(IndentFolding(), doc, 1) == Span(9, 17)


def test_indent_no_fold_without_children():
    doc = Document(NESTED)
    assert _fold(IndentFolding(), doc, 2) is None
    assert _fold(IndentFolding(), doc, 3) is None


def test_indent_skips_blank_lines_but_not_at_tail():
    doc = Document("- a\n\n  b\n\n- c")
    assert _fold(IndentFolding(), doc, 0) == Span(3, 8)


def test_indent_tabs_are_deeper_than_spaces():
    doc = Document("  - a\n\t- b")
    assert _fold(IndentFolding(), doc, 0) == Span(5, 10)


def test_indent_blank_anchor_does_not_fold():
    doc = Document("\n  a")
    assert _fold(IndentFolding(), doc, 0) is None


def test_indent_folds_non_bullet_lines():
    doc = Document("Heading\n  detail")
    assert _fold(IndentFolding(), doc, 0) == Span(7, 16)


def test_markdown_folds_list_item():
    doc = Document(NESTED)
    assert _fold(MarkdownFolding(), doc, 0) == Span(3, 17)


def test_markdown_folds_nested_item():
    doc = Document(NESTED)
    assert _fold(MarkdownFolding(), doc, 1) == Span(9, 17)


def test_markdown_single_line_item_does_not_fold():
    doc = Document(NESTED)
    assert _fold(MarkdownFolding(), doc, 3) is None


def test_markdown_drops_trailing_blank_lines():
    doc = Document("- a\n  b\n\n- c")
    assert _fold(MarkdownFolding(), doc, 0) == Span(3, 7)


def test_markdown_ignores_non_items():
    doc = Document("Some text\n\n- a\n  - b")
    assert _fold(MarkdownFolding(), doc, 0) is None


def test_markdown_ignores_code_fences():
    doc = Document("```\n- a\n  - b\n```")
    assert _fold(MarkdownFolding(), doc, 1) is None
