"""Handlers for 'bulletnote config' commands."""

from pathlib import Path

from bulletnote.cli._common import error, output_json, output_result
from bulletnote.errors import SettingsError
from bulletnote.settings import coerce_value, read_settings, write_setting


def config_list(args) -> int:
    """Show every setting with its effective value."""
    settings = read_settings(Path(args.vault).resolve())
    if args.json:
        output_json(settings)
    else:
        for key, value in settings.items():
            print(f"{key} = {_format(value)}")
    return 0


def config_get(args) -> int:
    """Show one setting."""
    settings = read_settings(Path(args.vault).resolve())
    key = args.key.replace("_", "-")
    if key not in settings:
        error(f"Unknown setting '{args.key}'. Known: {', '.join(settings)}", args.json)
    output_result({key: settings[key]}, _format(settings[key]), args.json)
    return 0


def config_set(args) -> int:
    """Persist one setting in the vault's git config."""
    key = args.key.replace("_", "-")
    try:
        value = coerce_value(key, args.value)
        write_setting(Path(args.vault).resolve(), key, value)
    except SettingsError as e:
        error(str(e), args.json)
    output_result({key: value}, f"{key} = {_format(value)}", args.json)
    return 0


def _format(value) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return f'"{value}"' if value == "" else str(value)
