"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from registry.infrastructure.config import get_settings
from registry.infrastructure.persistence.json_gender_repository import (
    JsonGenderRepository,
)


def gender_repository() -> JsonGenderRepository:
    return JsonGenderRepository(get_settings().data_dir / "genders.json")
