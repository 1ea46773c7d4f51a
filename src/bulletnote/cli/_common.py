"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from bulletnote.document import Document
from bulletnote.folding import IndentFolding, MarkdownFolding

FOLDINGS = {
    "indent": IndentFolding,
    "markdown": MarkdownFolding,
    "none": lambda: None,
}


def setup_logging(verbose: bool) -> None:
    """Log to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            level=logging.DEBUG,
            stream=sys.stderr,
        )


def load_document_or_die(path: str, json_mode: bool) -> Document:
    """Read a markdown file, keeping its line breaks. Exit 1 if unreadable."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return Document(f.read())
    except OSError as e:
        error(f"Cannot read {path}: {e.strerror}", json_mode)


def save_document(path: str | Path, doc: Document) -> None:
    """Write a document back, line breaks untouched."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(doc.text)


def cursor_offset_or_die(doc: Document, line: int, ch: int, json_mode: bool) -> int:
    """Convert a 1-indexed line and 0-indexed column to an offset. Exit 1 if out of range."""
    if not 1 <= line <= doc.line_count:
        error(f"Line {line} out of range (document has {doc.line_count} lines).", json_mode)
    return doc.pos_to_offset(line - 1, ch)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
