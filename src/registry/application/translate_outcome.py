"""Maps a lookup Outcome onto the response a caller receives."""

from __future__ import annotations

from http import HTTPStatus

from registry.application.dto import ErrorDTO, ResponseDTO
from registry.domain.model.outcome import Outcome, match


def to_response(outcome: Outcome[object]) -> ResponseDTO:
    """Absent -> 404, Found(v) -> 200 carrying v, Failed(e) -> 500 describing e."""
    return match(
        outcome,
        absent=lambda: ResponseDTO(status=HTTPStatus.NOT_FOUND),
        found=lambda value: ResponseDTO(status=HTTPStatus.OK, payload=value),
        failed=lambda error: ResponseDTO(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            payload=ErrorDTO(type=type(error).__name__, message=str(error)),
        ),
    )
