from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from periodic_notes.config import reset_settings
from periodic_notes.models import EntryKind


class InMemoryVault:
    """Vault fake that records every mutation and enforces parent folders."""

    def __init__(self) -> None:
        self.entries: Dict[str, EntryKind] = {}
        self.contents: Dict[str, str] = {}
        self.mutations: List[Tuple[str, str]] = []
        self.lookups: List[str] = []

    def add_folder(self, path: str) -> None:
        self.entries[path] = EntryKind.FOLDER

    def add_note(self, path: str, content: str = "") -> None:
        self.entries[path] = EntryKind.NOTE
        self.contents[path] = content

    def _require_parent(self, path: str) -> None:
        parent = path.rpartition("/")[0]
        if parent and self.entries.get(parent) is not EntryKind.FOLDER:
            raise FileNotFoundError(f"Parent folder missing for {path}")
        if path in self.entries:
            raise FileExistsError(path)

    async def lookup(self, path: str) -> EntryKind:
        self.lookups.append(path)
        if not path:
            return EntryKind.FOLDER
        return self.entries.get(path, EntryKind.ABSENT)

    async def create_folder(self, path: str) -> str:
        self._require_parent(path)
        self.entries[path] = EntryKind.FOLDER
        self.mutations.append(("folder", path))
        return path

    async def create_note(self, path: str, content: str = "") -> str:
        self._require_parent(path)
        self.entries[path] = EntryKind.NOTE
        self.contents[path] = content
        self.mutations.append(("note", path))
        return path

    def snapshot(self) -> Dict[str, EntryKind]:
        return dict(self.entries)


class RecordingWorkspace:
    def __init__(self) -> None:
        self.opened: List[str] = []
        self.notices: List[str] = []

    async def open_note(self, path: str) -> None:
        self.opened.append(path)

    async def notify(self, message: str) -> None:
        self.notices.append(message)


class MemoryBackend:
    def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
        self.data = data
        self.saves: List[Dict[str, Any]] = []

    async def load_data(self) -> Optional[Dict[str, Any]]:
        return self.data

    async def save_data(self, data: Dict[str, Any]) -> None:
        self.data = dict(data)
        self.saves.append(dict(data))


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.delenv("SETTINGS_FILE", raising=False)
    monkeypatch.delenv("OBSIDIAN_VAULT_DIR", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def memory_vault() -> InMemoryVault:
    return InMemoryVault()


@pytest.fixture
def workspace() -> RecordingWorkspace:
    return RecordingWorkspace()


@pytest.fixture
def memory_backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
