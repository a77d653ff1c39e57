"""Shared file handling for the JSON-backed repositories.

Each repository keeps a list of records in one file and rewrites the
whole file on every change. I/O and decoding failures surface as
``CatalogPersistenceError``.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import CatalogPersistenceError


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogPersistenceError(f"Could not read {self._file_path}", exc) from exc
        if not isinstance(records, list):
            raise CatalogPersistenceError(
                f"Expected a JSON list in {self._file_path}, got {type(records).__name__}"
            )
        return records

    def persist(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise CatalogPersistenceError(f"Could not write {self._file_path}", exc) from exc

    def next_id(self) -> int:
        records = self.load()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def upsert(self, record: dict) -> None:
        """Replace the record with the same id, or append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise CatalogPersistenceError(f"Could not create {self._file_path}", exc) from exc
