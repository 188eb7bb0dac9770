"""Idempotent creation of folder/note hierarchies inside a vault."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from periodic_notes.models import EntryKind, Segment
from periodic_notes.vault import VaultStorage

logger = logging.getLogger(__name__)


class PeriodicNotesError(RuntimeError):
    """Base class for errors raised by periodic note operations."""


class PathConflictError(PeriodicNotesError):
    """Raised when a path is occupied by the wrong kind of entry."""

    def __init__(self, path: str, expected: EntryKind):
        found = EntryKind.NOTE if expected is EntryKind.FOLDER else EntryKind.FOLDER
        super().__init__(f"Cannot use '{path}' as a {expected.value}: a {found.value} already exists there.")
        self.path = path
        self.expected = expected


@dataclass(slots=True)
class MaterializeReport:
    note_path: str
    created_folders: List[str] = field(default_factory=list)
    created_notes: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.created_folders or self.created_notes)


async def materialize(vault: VaultStorage, segments: Sequence[Segment]) -> str:
    """Ensure every segment exists and return the path of the last note."""

    report = await materialize_with_report(vault, segments)
    return report.note_path


async def materialize_with_report(vault: VaultStorage, segments: Sequence[Segment]) -> MaterializeReport:
    """Like :func:`materialize`, but also list what had to be created.

    Segments are processed outermost first, so each folder's parent exists by
    the time the folder is created. A folder that exists without its note is
    completed rather than skipped. Existing notes are never written to.
    """

    if not segments:
        raise ValueError("At least one segment is required")

    report = MaterializeReport(note_path=segments[-1].note_path)

    # Root folder components get no folder notes.
    for ancestor in _ancestors(segments[0].folder_path):
        await _ensure_folder(vault, ancestor, report)

    for segment in segments:
        await _ensure_folder(vault, segment.folder_path, report)
        await _ensure_note(vault, segment.note_path, report)

    return report


def _ancestors(folder_path: str) -> List[str]:
    parts = [part for part in folder_path.split("/") if part]
    return ["/".join(parts[:idx]) for idx in range(1, len(parts))]


async def _ensure_folder(vault: VaultStorage, path: str, report: MaterializeReport) -> None:
    if not path:
        return
    kind = await vault.lookup(path)
    if kind is EntryKind.FOLDER:
        return
    if kind is EntryKind.NOTE:
        raise PathConflictError(path, EntryKind.FOLDER)
    await vault.create_folder(path)
    logger.debug("Created folder %s", path)
    report.created_folders.append(path)


async def _ensure_note(vault: VaultStorage, path: str, report: MaterializeReport) -> None:
    kind = await vault.lookup(path)
    if kind is EntryKind.NOTE:
        return
    if kind is EntryKind.FOLDER:
        raise PathConflictError(path, EntryKind.NOTE)
    await vault.create_note(path, "")
    logger.debug("Created note %s", path)
    report.created_notes.append(path)


__all__ = [
    "PeriodicNotesError",
    "PathConflictError",
    "MaterializeReport",
    "materialize",
    "materialize_with_report",
]
