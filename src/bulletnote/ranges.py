"""Resolve the span of text owned by the bullet under the cursor."""

from __future__ import annotations

import logging
import re

from bulletnote.document import DocumentQuery, FoldingQuery, Span

logger = logging.getLogger(__name__)

BULLET_RE = re.compile(r"^\s*([-*+]|\d+\.)\s+")


def is_bullet_line(text: str) -> bool:
    """True if ``text`` starts with a list marker followed by whitespace."""
    return BULLET_RE.match(text) is not None


def resolve_range(doc: DocumentQuery, offset: int, folding: FoldingQuery | None = None) -> Span | None:
    """Return the span from the start of the cursor's line to the end of its content.

    A fold reported by ``folding`` is trusted whether or not the line is a
    bullet. Without a fold, a bullet line owns only itself and any other
    line owns nothing (None).
    """
    line = doc.line_at(offset)
    fold = folding.foldable(doc, line.start, line.end) if folding is not None else None

    if fold is None:
        if is_bullet_line(line.text):
            logger.debug("no fold at line %d, using the bullet line alone", line.number)
            return Span(line.start, line.end)
        return None

    return Span(line.start, max(fold.end, line.end))
