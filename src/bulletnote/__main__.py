"""Entry point for bulletnote CLI."""

import sys
from pathlib import Path

NOUNS = {"transfer", "check", "config"}


def main():
    # A file argument (or nothing) opens the editor
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        from bulletnote.ui import BulletNoteApp

        path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
        app = BulletNoteApp(path, vault=Path.cwd())
        app.run()
        return

    from bulletnote.cli import build_parser
    from bulletnote.cli._common import setup_logging

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
