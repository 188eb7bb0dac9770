"""Host interfaces and the on-disk vault adapter."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol

import aiofiles
import aiofiles.os

from periodic_notes.models import EntryKind


class VaultStorage(Protocol):
    """Storage operations the materializer relies on.

    Paths are vault-relative and ``/``-separated. An empty path is the vault
    root.
    """

    async def lookup(self, path: str) -> EntryKind: ...

    async def create_folder(self, path: str) -> str: ...

    async def create_note(self, path: str, content: str = "") -> str: ...


class Workspace(Protocol):
    """UI side of the host: focusing notes and transient feedback."""

    async def open_note(self, path: str) -> None: ...

    async def notify(self, message: str) -> None: ...


class FileSystemVault:
    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def resolve(self, relative_path: str) -> Path:
        return self.base_dir.joinpath(*[part for part in relative_path.split("/") if part])

    async def lookup(self, path: str) -> EntryKind:
        target = self.resolve(path)
        if await aiofiles.os.path.isdir(target):
            return EntryKind.FOLDER
        if await aiofiles.os.path.exists(target):
            return EntryKind.NOTE
        return EntryKind.ABSENT

    async def create_folder(self, path: str) -> str:
        # Parents are created by the caller, one level at a time.
        await aiofiles.os.mkdir(self.resolve(path))
        return path

    async def create_note(self, path: str, content: str = "") -> str:
        # "x" refuses to clobber a note that appeared since the lookup.
        async with aiofiles.open(self.resolve(path), "x", encoding="utf-8") as handle:
            await handle.write(content)
        return path


class ConsoleWorkspace:
    """Workspace that reports opened notes on stdout."""

    def __init__(self, vault: FileSystemVault | None = None):
        self.vault = vault
        self.opened: list[str] = []

    async def open_note(self, path: str) -> None:
        self.opened.append(path)
        location = self.vault.resolve(path) if self.vault is not None else path
        print(f"Opened {location}")

    async def notify(self, message: str) -> None:
        print(message)


__all__ = ["VaultStorage", "Workspace", "FileSystemVault", "ConsoleWorkspace"]
