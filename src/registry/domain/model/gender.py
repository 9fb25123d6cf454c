"""Gender entity.

A gender is a tiny reference record: an id and a display name. Unlike
catalog entries that get repriced, it never changes after creation, so
it is a frozen dataclass and is shared freely between layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from registry.domain.exceptions import ValidationError
from registry.domain.model.identifier import EMPTY_ID


@dataclass(frozen=True)
class Gender:

    id: UUID
    name: str

    def __post_init__(self) -> None:
        if self.id == EMPTY_ID:
            raise ValidationError("Gender id cannot be the empty UUID")
        if not self.name or not self.name.strip():
            raise ValidationError("Gender name cannot be empty")
