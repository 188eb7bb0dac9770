"""Command-line entry point for creating periodic notes in a local vault."""
from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path
from typing import Sequence

from periodic_notes.commands import COMMANDS, LAST_DAYS_DEFAULT, NoteCommands
from periodic_notes.config import PLUGIN_DATA_PATH, get_settings
from periodic_notes.logging_utils import set_verbose
from periodic_notes.materializer import PeriodicNotesError
from periodic_notes.settings_store import JsonFileBackend, SettingsStore
from periodic_notes.vault import ConsoleWorkspace, FileSystemVault

SUBCOMMANDS = {
    "daily": "create-daily-note",
    "weekly": "create-weekly-note",
    "monthly": "create-monthly-note",
    "yearly": "create-yearly-note",
    "yesterday": "open-yesterday-note",
    "tomorrow": "open-tomorrow-note",
    "last-days": "open-last-5-days",
    "generate-year": "generate-year-daily-notes",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="periodic-notes", description="Create nested periodic notes in an Obsidian vault")
    parser.add_argument("--vault", type=Path, help="Override Obsidian vault path")
    parser.add_argument("--date", type=date.fromisoformat, help="Pretend today is this date (YYYY-MM-DD)")
    parser.add_argument("--settings-file", type=Path, help="Override where the note folder setting is stored")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every created folder and note")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, command_id in SUBCOMMANDS.items():
        sub = subparsers.add_parser(name, help=COMMANDS[command_id].name)
        if name == "last-days":
            sub.add_argument("--count", type=int, default=LAST_DAYS_DEFAULT, help="Number of days to open")

    subparsers.add_parser("commands", help="List available command ids")

    config_parser = subparsers.add_parser("config", help="Show or change the note folder")
    config_sub = config_parser.add_subparsers(dest="config_action", required=True)
    config_sub.add_parser("show", help="Print the configured note folder")
    set_folder = config_sub.add_parser("set-folder", help="Set the folder periodic notes are created in")
    set_folder.add_argument("folder", help="Vault-relative folder, '/' for the vault root")
    return parser


async def run_cli(args: argparse.Namespace) -> int:
    settings = get_settings()
    vault_dir = args.vault or Path(settings.obsidian_vault_dir)
    settings_path = args.settings_file or settings.settings_path
    if args.vault is not None and args.settings_file is None and settings.settings_file is None:
        settings_path = vault_dir / PLUGIN_DATA_PATH

    store = SettingsStore(JsonFileBackend(settings_path))
    await store.load()

    if args.command == "commands":
        for command_id, spec in COMMANDS.items():
            print(f"{command_id}\t{spec.name}")
        return 0

    if args.command == "config":
        if args.config_action == "set-folder":
            await store.set_note_folder(args.folder)
        print(f"Note folder: {store.get_note_folder()}")
        return 0

    vault = FileSystemVault(vault_dir)
    today_provider = (lambda: args.date) if args.date else None
    commands = NoteCommands(vault, ConsoleWorkspace(vault), store, today_provider=today_provider)

    kwargs = {"count": args.count} if args.command == "last-days" else {}
    result = await commands.run_command(SUBCOMMANDS[args.command], **kwargs)
    if args.command == "generate-year":
        print(f"Created {result.created} entries under {vault_dir}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    try:
        return asyncio.run(run_cli(args))
    except (PeriodicNotesError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
