"""Turn the text owned by a bullet into a note body."""

from __future__ import annotations

import logging
import re

from bulletnote.indent import detect_token

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def strip_once(line: str, token: str | None) -> str:
    """Remove the first occurrence of ``token`` from ``line``."""
    if not token:
        return line
    return line.replace(token, "", 1)


def strip_compensated(line: str, token: str | None, extra: str | None) -> str:
    """Strip ``token`` once, then ``extra`` once.

    Used when the bullet line is dropped: its children sit one level
    deeper than the note's new top level, so they lose one more indent.
    """
    return strip_once(strip_once(line, token), extra)


def _fallback_extra(token: str | None) -> str | None:
    """Second strip operand when the bullet line itself is not indented.

    Space indentation is already a single level once the token is gone;
    anything else (tabs, or no indentation at all) loses one tab.
    """
    if token and token.startswith(" "):
        return None
    return "\t"


def reshape(text: str, token: str | None, remove_first_line: bool) -> str:
    """Build the note content from a bullet's extracted ``text``.

    ``token`` is the bullet line's own leading whitespace (None if it has
    none). Every child line loses that token once; with
    ``remove_first_line`` the bullet line is dropped and children lose one
    extra level of indentation. Processed output is joined with ``\\n``.
    """
    lines = _LINE_BREAK.split(text)

    if token:
        if remove_first_line:
            return "\n".join(strip_compensated(line, token, token[0]) for line in lines[1:])
        return "\n".join(strip_once(line, token) for line in lines)

    if not remove_first_line:
        return text

    child_token = detect_token(lines[1]) if len(lines) > 1 else None
    extra = _fallback_extra(child_token)
    logger.debug("bullet line not indented, stripping child token %r then %r", child_token, extra)
    return "\n".join(strip_compensated(line, child_token, extra) for line in lines[1:])
