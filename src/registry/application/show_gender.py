"""Application service: Show Gender use case (query).

Unlike the command handlers this one never raises for a failed lookup.
It answers with an Outcome so the caller can tell "no such id" apart
from "the store is broken".
"""

from __future__ import annotations

import logging
from uuid import UUID

from registry.domain.model.gender import Gender
from registry.domain.model.identifier import validate_identifier
from registry.domain.model.outcome import (
    Absent,
    Failed,
    Outcome,
    chain,
    from_optional,
)
from registry.domain.repository.gender_repository import GenderRepository

logger = logging.getLogger(__name__)


class ShowGenderHandler:

    def __init__(self, gender_repo: GenderRepository) -> None:
        self._gender_repo = gender_repo

    async def handle(self, raw_id: UUID) -> Outcome[Gender]:
        identifier = from_optional(validate_identifier(raw_id))
        if isinstance(identifier, Absent):
            logger.debug("Rejected empty gender id")
            return identifier

        outcome = await chain(identifier, self._lookup)

        if isinstance(outcome, Failed):
            logger.warning(
                "Lookup of gender %s failed: %s: %s",
                raw_id,
                type(outcome.error).__name__,
                outcome.error,
            )
        elif isinstance(outcome, Absent):
            logger.debug("Gender %s not found", raw_id)
        return outcome

    async def _lookup(self, gender_id: UUID) -> Outcome[Gender]:
        async with self._gender_repo.session() as repo:
            gender = await repo.get_by_id(gender_id)
        return from_optional(gender)
