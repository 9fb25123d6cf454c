"""Application service: Add Gender use case."""

from __future__ import annotations

import logging
from uuid import uuid4

from registry.application.dto import GenderDTO
from registry.domain.exceptions import ValidationError
from registry.domain.model.gender import Gender
from registry.domain.repository.gender_repository import GenderRepository

logger = logging.getLogger(__name__)


class AddGenderHandler:

    def __init__(self, gender_repo: GenderRepository) -> None:
        self._gender_repo = gender_repo

    async def handle(self, name: str) -> GenderDTO:
        """Register a new gender under a freshly generated id."""
        if not name or not name.strip():
            raise ValidationError("Gender name is required")

        existing = await self._gender_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Gender '{name.strip()}' already exists")

        gender = Gender(id=uuid4(), name=name.strip())
        await self._gender_repo.save(gender)
        logger.info("Added gender %s (%s)", gender.name, gender.id)
        return GenderDTO(id=str(gender.id), name=gender.name)
