"""Application service: List Genders use case (query)."""

from __future__ import annotations

from registry.application.dto import GenderDTO
from registry.domain.repository.gender_repository import GenderRepository


class ListGendersHandler:

    def __init__(self, gender_repo: GenderRepository) -> None:
        self._gender_repo = gender_repo

    async def handle(self) -> list[GenderDTO]:
        genders = await self._gender_repo.list_all()
        return [
            GenderDTO(id=str(g.id), name=g.name)
            for g in sorted(genders, key=lambda g: g.name.lower())
        ]
