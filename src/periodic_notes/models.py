"""Data models shared across the project."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Granularity = Literal["day", "week", "month", "year"]

GRANULARITIES: tuple[Granularity, ...] = ("day", "week", "month", "year")

NOTE_EXTENSION = ".md"


class EntryKind(Enum):
    """What currently occupies a vault path."""

    FOLDER = "folder"
    NOTE = "note"
    ABSENT = "absent"


@dataclass(frozen=True, slots=True)
class CalendarIdentifiers:
    """Calendar names derived from a single date."""

    year: str
    year_month: str
    year_month_day: str
    iso_year_week: str
    week_start_year: str
    week_start_month: str


@dataclass(frozen=True, slots=True)
class Segment:
    """A folder that must exist and the note to ensure inside it."""

    folder_path: str
    note_name: str

    @property
    def note_path(self) -> str:
        file_name = f"{self.note_name}{NOTE_EXTENSION}"
        if not self.folder_path:
            return file_name
        return f"{self.folder_path}/{file_name}"


class NotesConfig(BaseModel):
    """Persisted configuration record."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Stored under the key the Obsidian plugin uses in data.json.
    note_folder: str = Field("/", alias="noteFolder")


__all__ = [
    "Granularity",
    "GRANULARITIES",
    "NOTE_EXTENSION",
    "EntryKind",
    "CalendarIdentifiers",
    "Segment",
    "NotesConfig",
]
