"""JSON-file-backed implementation of GenderRepository.

File access is blocking, so every read and write is pushed onto a
worker thread with ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from uuid import UUID

from registry.domain.exceptions import RepositoryError, ValidationError
from registry.domain.model.gender import Gender
from registry.domain.repository.gender_repository import GenderRepository


class JsonGenderRepository(GenderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- GenderRepository interface -------------------------------------------

    async def get_by_id(self, gender_id: UUID) -> Gender | None:
        genders = await asyncio.to_thread(self._load)
        return genders.get(gender_id)

    async def get_by_name(self, name: str) -> Gender | None:
        for gender in (await asyncio.to_thread(self._load)).values():
            if gender.name.lower() == name.lower():
                return gender
        return None

    async def list_all(self) -> list[Gender]:
        return list((await asyncio.to_thread(self._load)).values())

    async def save(self, gender: Gender) -> None:
        genders = await asyncio.to_thread(self._load)
        genders[gender.id] = gender
        await asyncio.to_thread(self._persist, genders)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Gender]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            genders = [Gender(id=UUID(item["id"]), name=item["name"]) for item in raw]
        except (
            OSError,
            ValueError,
            KeyError,
            TypeError,
            AttributeError,
            ValidationError,
        ) as exc:
            raise RepositoryError(
                f"Cannot read gender store {self._file_path}: {exc}"
            ) from exc
        return {g.id: g for g in genders}

    def _persist(self, genders: dict[UUID, Gender]) -> None:
        raw = [{"id": str(g.id), "name": g.name} for g in genders.values()]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise RepositoryError(
                f"Cannot write gender store {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
