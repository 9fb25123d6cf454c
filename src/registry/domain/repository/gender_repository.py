"""Abstract repository for the Gender entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from registry.domain.model.gender import Gender


class GenderRepository(ABC):

    @asynccontextmanager
    async def session(self) -> AsyncIterator[GenderRepository]:
        """Acquire whatever the backend needs for a query and release it on exit.

        The default holds nothing and yields the repository itself.
        """
        yield self

    @abstractmethod
    async def get_by_id(self, gender_id: UUID) -> Gender | None:
        """Return a gender by its ID, or None if not found."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Gender | None:
        """Return a gender by name (case-insensitive), or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Gender]:
        """Return every stored gender."""

    @abstractmethod
    async def save(self, gender: Gender) -> None:
        """Persist a new or updated gender."""
