"""High-level note commands: resolve dates, materialize, open."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import PurePosixPath
from typing import Callable, Dict, List, Optional

from periodic_notes.config import get_settings
from periodic_notes.logging_utils import log_event
from periodic_notes.materializer import MaterializeReport, PeriodicNotesError, materialize_with_report
from periodic_notes.models import Granularity
from periodic_notes.path_builder import build_segments
from periodic_notes.settings_store import SettingsStore
from periodic_notes.time_utils import get_timezone, get_today, resolve_calendar_ids
from periodic_notes.vault import VaultStorage, Workspace

LAST_DAYS_DEFAULT = 5


class UnknownCommandError(PeriodicNotesError):
    """Raised when a command id is not registered."""

    def __init__(self, command_id: str):
        super().__init__(f"Unknown command '{command_id}'.")
        self.command_id = command_id


@dataclass(slots=True)
class CommandResult:
    command: str
    note_paths: List[str] = field(default_factory=list)
    opened: Optional[str] = None
    created: int = 0


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: str


COMMANDS: Dict[str, CommandSpec] = {
    "create-daily-note": CommandSpec("Create today's daily note", "open_daily"),
    "create-weekly-note": CommandSpec("Create this week's note", "open_weekly"),
    "create-monthly-note": CommandSpec("Create this month's note", "open_monthly"),
    "create-yearly-note": CommandSpec("Create this year's note", "open_yearly"),
    "open-yesterday-note": CommandSpec("Open yesterday's daily note", "open_yesterday"),
    "open-tomorrow-note": CommandSpec("Open tomorrow's daily note", "open_tomorrow"),
    "open-last-5-days": CommandSpec("Open daily notes for the last 5 days", "open_last_days"),
    "generate-year-daily-notes": CommandSpec("Generate all daily notes for the current year", "generate_year"),
}


def _default_today() -> date:
    settings = get_settings()
    return get_today(get_timezone(settings.timezone))


class NoteCommands:
    """User-invoked actions over a vault and its workspace."""

    def __init__(
        self,
        vault: VaultStorage,
        workspace: Workspace,
        settings_store: SettingsStore,
        *,
        today_provider: Callable[[], date] | None = None,
    ):
        self.vault = vault
        self.workspace = workspace
        self.settings_store = settings_store
        self.today_provider = today_provider or _default_today

    async def run_command(self, command_id: str, **kwargs) -> CommandResult:
        spec = COMMANDS.get(command_id)
        if spec is None:
            raise UnknownCommandError(command_id)
        handler = getattr(self, spec.handler)
        try:
            result = await handler(**kwargs)
        except (PeriodicNotesError, OSError, ValueError) as exc:
            log_event({"status": "error", "command": command_id, "error": str(exc)})
            raise
        result.command = command_id
        log_event(
            {
                "status": "success",
                "command": command_id,
                "note_path": result.opened or (result.note_paths[-1] if result.note_paths else None),
                "created": result.created,
            }
        )
        return result

    async def open_periodic(self, granularity: Granularity, offset_days: int = 0) -> CommandResult:
        report = await self._materialize(granularity, self.today_provider(), offset_days)
        await self._open(report.note_path)
        return CommandResult(
            command=f"open-{granularity}",
            note_paths=[report.note_path],
            opened=report.note_path,
            created=_created_count(report),
        )

    async def open_daily(self) -> CommandResult:
        return await self.open_periodic("day")

    async def open_weekly(self) -> CommandResult:
        return await self.open_periodic("week")

    async def open_monthly(self) -> CommandResult:
        return await self.open_periodic("month")

    async def open_yearly(self) -> CommandResult:
        return await self.open_periodic("year")

    async def open_yesterday(self) -> CommandResult:
        return await self.open_periodic("day", -1)

    async def open_tomorrow(self) -> CommandResult:
        return await self.open_periodic("day", 1)

    async def open_last_days(self, count: int = LAST_DAYS_DEFAULT) -> CommandResult:
        """Open each of the last ``count`` daily notes, oldest first."""

        if count < 1:
            raise ValueError("count must be at least 1")
        today = self.today_provider()
        result = CommandResult(command="open-last-days")
        for offset in range(-(count - 1), 1):
            report = await self._materialize("day", today, offset)
            await self._open(report.note_path)
            result.note_paths.append(report.note_path)
            result.opened = report.note_path
            result.created += _created_count(report)
        return result

    async def generate_year(self) -> CommandResult:
        """Create daily notes from today through December 31 without opening them."""

        today = self.today_provider()
        remaining = (date(today.year, 12, 31) - today).days
        result = CommandResult(command="generate-year")
        for offset in range(remaining + 1):
            report = await self._materialize("day", today, offset)
            result.note_paths.append(report.note_path)
            result.created += _created_count(report)
        await self.workspace.notify(f"Generated {len(result.note_paths)} daily notes for {today.year}.")
        return result

    async def _materialize(self, granularity: Granularity, base: date, offset_days: int) -> MaterializeReport:
        ids = resolve_calendar_ids(base, offset_days)
        segments = build_segments(self.settings_store.get_note_folder(), granularity, ids)
        return await materialize_with_report(self.vault, segments)

    async def _open(self, note_path: str) -> None:
        await self.workspace.open_note(note_path)
        await self.workspace.notify(f"Note {PurePosixPath(note_path).stem} is opened.")


def _created_count(report: MaterializeReport) -> int:
    return len(report.created_folders) + len(report.created_notes)


__all__ = [
    "COMMANDS",
    "CommandResult",
    "CommandSpec",
    "NoteCommands",
    "UnknownCommandError",
    "LAST_DAYS_DEFAULT",
]
