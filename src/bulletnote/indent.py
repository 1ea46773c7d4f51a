"""Leading indentation detection."""

import re

_LEADING = re.compile(r"^[ \t]+")


def detect_token(line: str) -> str | None:
    """Return the leading run of spaces and tabs of ``line``, or None.

    The run is returned as written, mixed tabs and spaces included.

    "  text" → "  ", "\\t- a" → "\\t", "text" → None
    """
    match = _LEADING.match(line)
    return match.group(0) if match else None
