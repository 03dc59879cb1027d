"""A JSON array on disk, shared by the file-backed repositories."""

from __future__ import annotations

import json
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path, empty: str = "[]") -> None:
        self._file_path = file_path
        self._empty = empty
        self._ensure_file()

    def load(self):
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, data) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(self._empty, encoding="utf-8")
