"""CLI argument parser and dispatch for bulletnote."""

import argparse

from bulletnote.cli.config import config_get, config_list, config_set
from bulletnote.cli.transfer import check, transfer


def _add_cursor_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Markdown file containing the bullet")
    parser.add_argument("--line", type=int, required=True, help="Line of the bullet (1-indexed)")
    parser.add_argument("--ch", type=int, default=0, help="Cursor column on that line (default: 0)")
    parser.add_argument(
        "--folding",
        choices=["indent", "markdown", "none"],
        default="indent",
        help="How nested content is found (default: indent)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--vault", default=".", help="Folder notes are created in (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")

    parser = argparse.ArgumentParser(
        prog="bulletnote",
        description="Transfer markdown bullets into notes",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- transfer ---
    transfer_p = nouns.add_parser("transfer", help="Transfer a bullet to a new note", parents=[common])
    _add_cursor_args(transfer_p)
    transfer_p.add_argument(
        "--remove-first-line",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop the bullet line from the note",
    )
    transfer_p.add_argument(
        "--keep-original-text",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave the source untouched instead of linking to the note",
    )
    transfer_p.add_argument("--folder", default=None, help='Note folder ("" root, "." beside the source)')
    transfer_p.add_argument(
        "--commit",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Commit the note and source to git",
    )
    transfer_p.add_argument("--dry-run", action="store_true", help="Print the note instead of creating it")
    transfer_p.set_defaults(func=transfer)

    # --- check ---
    check_p = nouns.add_parser("check", help="Show what a bullet owns", parents=[common])
    _add_cursor_args(check_p)
    check_p.set_defaults(func=check)

    # --- config ---
    config_p = nouns.add_parser("config", help="Settings stored in git config", parents=[common])
    config_verbs = config_p.add_subparsers(dest="verb")

    config_list_p = config_verbs.add_parser("list", help="List settings", parents=[common])
    config_list_p.set_defaults(func=config_list)

    config_get_p = config_verbs.add_parser("get", help="Show a setting", parents=[common])
    config_get_p.add_argument("key", help="Setting name")
    config_get_p.set_defaults(func=config_get)

    config_set_p = config_verbs.add_parser("set", help="Change a setting", parents=[common])
    config_set_p.add_argument("key", help="Setting name")
    config_set_p.add_argument("value", help="New value")
    config_set_p.set_defaults(func=config_set)

    # config with no verb = list
    config_p.set_defaults(func=config_list)

    return parser
