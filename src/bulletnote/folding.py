"""Folding providers: which lines collapse under a given line.

Each provider answers ``foldable(doc, line_start, line_end)`` with a span
running from the end of the anchor line to the end of the last line it owns,
or None when nothing folds there.
"""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt

from bulletnote.document import DocumentQuery, Span

logger = logging.getLogger(__name__)


def indent_width(line: str, tab_size: int = 4) -> int:
    """Column reached by the leading whitespace of ``line``."""
    width = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += tab_size - width % tab_size
        else:
            break
    return width


class IndentFolding:
    """Fold every following line indented deeper than the anchor line.

    Blank lines inside the block do not end it, but trailing blank lines
    are left out of the fold.
    """

    def __init__(self, tab_size: int = 4):
        self.tab_size = tab_size

    def foldable(self, doc: DocumentQuery, line_start: int, line_end: int) -> Span | None:
        anchor = doc.line_at(line_start)
        if not anchor.text.strip():
            return None
        base = indent_width(anchor.text, self.tab_size)

        last = None
        for number in range(anchor.number + 1, doc.line_count):
            line = doc.line(number)
            if not line.text.strip():
                continue
            if indent_width(line.text, self.tab_size) <= base:
                break
            last = line

        if last is None:
            return None
        return Span(line_end, last.end)


class MarkdownFolding:
    """Fold a list item over the source lines markdown-it assigns to it.

    Covers nested lists and continuation paragraphs. Lines that do not open
    a list item, and single-line items, do not fold.
    """

    def __init__(self):
        self._md = MarkdownIt("gfm-like")

    def foldable(self, doc: DocumentQuery, line_start: int, line_end: int) -> Span | None:
        anchor = doc.line_at(line_start)
        lines = [doc.line(i).text for i in range(doc.line_count)]
        tokens = self._md.parse("\n".join(lines))

        for token in tokens:
            if token.type != "list_item_open" or not token.map:
                continue
            item_start, item_end = token.map
            if item_start != anchor.number:
                continue
            # markdown-it may include trailing blank lines in the item
            last = item_end - 1
            while last > anchor.number and not lines[last].strip():
                last -= 1
            if last == anchor.number:
                return None
            logger.debug("list item at line %d folds to line %d", anchor.number, last)
            return Span(line_end, doc.line(last).end)

        return None
