"""Persistence of the notes configuration record."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import aiofiles
import aiofiles.os

from periodic_notes.models import NotesConfig


class SettingsBackend(Protocol):
    """Generic key-value persistence offered by the host."""

    async def load_data(self) -> Optional[Dict[str, Any]]: ...

    async def save_data(self, data: Dict[str, Any]) -> None: ...


class JsonFileBackend:
    def __init__(self, path: Path):
        self.path = Path(path)

    async def load_data(self) -> Optional[Dict[str, Any]]:
        if not await aiofiles.os.path.exists(self.path):
            return None
        async with aiofiles.open(self.path, "r", encoding="utf-8") as handle:
            raw = await handle.read()
        if not raw.strip():
            return None
        return json.loads(raw)

    async def save_data(self, data: Dict[str, Any]) -> None:
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as tmp_file:
            await tmp_file.write(json.dumps(data, ensure_ascii=False, indent=2))
        await aiofiles.os.replace(tmp_path, self.path)


class SettingsStore:
    """Holds the root folder setting and saves it on every change."""

    def __init__(self, backend: SettingsBackend):
        self.backend = backend
        self.config = NotesConfig()

    async def load(self) -> NotesConfig:
        data = await self.backend.load_data() or {}
        # Missing keys fall back to defaults; unknown keys are dropped.
        self.config = NotesConfig.model_validate(data)
        return self.config

    def get_note_folder(self) -> str:
        return self.config.note_folder

    async def set_note_folder(self, value: str) -> None:
        updated = self.config.model_copy(update={"note_folder": value})
        await self.backend.save_data(updated.model_dump(by_alias=True))
        self.config = updated


__all__ = ["SettingsBackend", "JsonFileBackend", "SettingsStore"]
