"""Tests for turning extracted bullet text into note content."""

from bulletnote.reshape import reshape, strip_compensated, strip_once


def test_strip_once_removes_first_occurrence():
    assert strip_once("    x", "  ") == "  x"
    assert strip_once("a  b  c", "  ") == "ab  c"


def test_strip_once_without_token():
    assert strip_once("  x", None) == "  x"
    assert strip_once("  x", "") == "  x"


def test_strip_compensated():
    assert strip_compensated("\t\t- x", "\t", "\t") == "- x"
    assert strip_compensated("    x", "  ", " ") == " x"
    assert strip_compensated("  x", "  ", None) == "x"


def test_remove_first_line_removes_one_level():
    text = "- parent\n  child1\n  child2"
    assert reshape(text, "  ", True) == "child1\nchild2"


def test_keep_first_line():
    assert reshape("- parent\n  child1", "  ", False) == "- parent\nchild1"


def test_keep_first_line_indented_bullet():
    text = "  - parent\n    - child\n      - grand"
    assert reshape(text, "  ", False) == "- parent\n  - child\n    - grand"


def test_no_token_keep_first_line_is_verbatim():
    text = "- a\r\n\tb\n  c"
    assert reshape(text, None, False) == text


def test_crlf_normalized():
    text = "  - a\r\n    b\r\n    c"
    assert reshape(text, "  ", False) == "- a\n  b\n  c"


def test_crlf_normalized_when_removing_first_line():
    assert reshape("- a\r\n  b\r\n  c", None, True) == "b\nc"


def test_tab_indented_bullet_removes_one_level():
    text = "\t- parent\n\t\t- child\n\t\t\t- grand"
    assert reshape(text, "\t", True) == "- child\n\t- grand"


def test_second_strip_uses_first_token_character():
    # Only one character of a multi-space token is stripped the second time
    text = "  - parent\n    - child\n      - grand"
    assert reshape(text, "  ", True) == " - child\n   - grand"


def test_no_token_remove_first_line_spaces():
    text = "- parent\n  - child\n    - grand"
    assert reshape(text, None, True) == "- child\n  - grand"


def test_no_token_remove_first_line_tabs():
    text = "- parent\n\t- child\n\t\t- grand"
    assert reshape(text, None, True) == "- child\n- grand"


def test_no_token_unindented_child_strips_a_tab():
    text = "- parent\nplain\n\tindented"
    assert reshape(text, None, True) == "plain\nindented"


def test_single_line_remove_first_line_is_empty():
    assert reshape("- only", None, True) == ""
    assert reshape("  - only", "  ", True) == ""


def test_single_line_keep_first_line():
    assert reshape("  - only", "  ", False) == "- only"


def test_empty_text():
    assert reshape("", None, False) == ""
    assert reshape("", None, True) == ""
