"""Host-neutral bullet transfer: checks, naming and the full extraction."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bulletnote.document import Document, DocumentQuery, FoldingQuery, Span
from bulletnote.indent import detect_token
from bulletnote.ranges import BULLET_RE, is_bullet_line, resolve_range
from bulletnote.reshape import reshape
from bulletnote.settings import Policy

logger = logging.getLogger(__name__)

_MARKER_AT_CURSOR = re.compile(r"^\s*([-*+]|\d+\.)\s?$")
_MD_SUFFIX = re.compile(r"\.(md|MD)$")


@dataclass(frozen=True)
class Transfer:
    """Everything a host needs to create the note and update the source."""

    span: Span
    text: str
    token: str | None
    content: str
    title: str
    file_name: str
    replacement: str | None = None


def cursor_on_marker(line_text: str, ch: int) -> bool:
    """True if column ``ch`` sits on (or just after) the line's list marker.

    Decides whether the "Transfer bullet to note" menu entry is offered.
    """
    return _MARKER_AT_CURSOR.match(line_text[: ch + 1]) is not None


def bullet_title(line_text: str) -> str:
    """Return the bullet's text without its marker and leading whitespace."""
    return BULLET_RE.sub("", line_text, count=1)


def note_file_name(title: str) -> str:
    """File name for a note titled ``title``.

    "Buy milk" → "Buy milk.md", "notes.md" → "notes.md"
    """
    return title if _MD_SUFFIX.search(title) else f"{title}.md"


def link_line(line_text: str) -> str:
    """Rewrite a bullet line so its text links to the note of the same name.

    "- Buy milk" → "- [[Buy milk]]"
    """
    match = BULLET_RE.match(line_text)
    if match is None:
        return line_text
    return f"{line_text[: match.end()]}[[{line_text[match.end():]}]]"


def transfer_bullet(
    doc: DocumentQuery,
    offset: int,
    policy: Policy,
    folding: FoldingQuery | None = None,
) -> Transfer | None:
    """Extract the bullet at ``offset`` and shape it into note content.

    Returns None when the cursor's line is not a bullet, has no text, or no
    range resolves. The document is not modified; see ``apply_transfer``.
    """
    line = doc.line_at(offset)
    if not is_bullet_line(line.text):
        return None
    title = bullet_title(line.text)
    # A blank title would name the note ".md"; refuse rather than create it
    if not title.strip():
        return None

    span = resolve_range(doc, offset, folding)
    if span is None:
        return None

    token = detect_token(line.text)
    text = doc.get_range(span.start, span.end)
    content = reshape(text, token, policy.remove_first_line)
    replacement = None if policy.keep_original_text else link_line(line.text)
    logger.debug("transfer line %d span %d-%d into %r", line.number, span.start, span.end, title)

    return Transfer(
        span=span,
        text=text,
        token=token,
        content=content,
        title=title,
        file_name=note_file_name(title),
        replacement=replacement,
    )


def apply_transfer(doc: Document, transfer: Transfer) -> Document:
    """Replace the transferred span with the link line, if the policy asks for it."""
    if transfer.replacement is not None:
        doc.replace_range(transfer.span.start, transfer.span.end, transfer.replacement)
    return doc
