"""Handlers for 'bulletnote transfer' and 'bulletnote check'."""

import sys
from pathlib import Path

from bulletnote.cli._common import (
    FOLDINGS,
    cursor_offset_or_die,
    error,
    load_document_or_die,
    output_json,
    output_result,
    save_document,
)
from bulletnote.errors import BulletNoteError
from bulletnote.ranges import resolve_range
from bulletnote.settings import load_policy
from bulletnote.transfer import apply_transfer, cursor_on_marker, transfer_bullet
from bulletnote.vault import commit_paths, create_note, note_parent, note_path, vault_repo


def transfer(args) -> int:
    """Move the bullet at --line into a new note."""
    vault = Path(args.vault).resolve()
    source = Path(args.file)
    doc = load_document_or_die(args.file, args.json)
    offset = cursor_offset_or_die(doc, args.line, args.ch, args.json)

    policy = load_policy(vault).override(
        remove_first_line=args.remove_first_line,
        keep_original_text=args.keep_original_text,
        note_folder=args.folder,
        auto_commit=args.commit,
    )
    result = transfer_bullet(doc, offset, policy, FOLDINGS[args.folding]())
    if result is None:
        error(f"Line {args.line} is not a bullet with text to transfer.", args.json)

    folder = note_parent(vault, source, policy.note_folder)

    if args.dry_run:
        try:
            path = note_path(vault, folder, result.file_name)
        except BulletNoteError as e:
            error(str(e), args.json)
        if args.json:
            output_json({"note": str(path), "content": result.content})
        else:
            print(f"would create {path}", file=sys.stderr)
            sys.stdout.write(result.content)
        return 0

    try:
        # Nothing is written unless the commit can follow
        if policy.auto_commit:
            vault_repo(vault)
        path = create_note(vault, folder, result.file_name, result.content)
    except BulletNoteError as e:
        error(str(e), args.json)

    changed = [path]
    if result.replacement is not None:
        save_document(source, apply_transfer(doc, result))
        changed.append(source)

    data = {"note": str(path), "title": result.title, "linked": result.replacement is not None}
    text = f"Created note {path}"
    if policy.auto_commit:
        try:
            commit = commit_paths(vault, changed, f"Transfer bullet to note: {result.title}")
        except BulletNoteError as e:
            error(f"{e} (note already written to {path})", args.json)
        data["commit"] = commit
        text += f" ({commit[:7]})"

    output_result(data, text, args.json)
    return 0


def check(args) -> int:
    """Report whether the cursor is on a bullet marker and what it owns."""
    doc = load_document_or_die(args.file, args.json)
    offset = cursor_offset_or_die(doc, args.line, args.ch, args.json)
    line = doc.line_at(offset)

    span = resolve_range(doc, offset, FOLDINGS[args.folding]())
    on_marker = cursor_on_marker(line.text, args.ch)
    data = {
        "line": args.line,
        "on_marker": on_marker,
        "span": None if span is None else {"start": span.start, "end": span.end},
    }
    if span is None:
        text = f"Line {args.line}: nothing to transfer"
    else:
        last_line = doc.line_at(span.end).number + 1
        marker = "" if on_marker else " (cursor not on marker)"
        text = f"Line {args.line}: owns lines {args.line}-{last_line}{marker}"

    output_result(data, text, args.json)
    return 0 if span is not None else 1
