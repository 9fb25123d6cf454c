"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GenderDTO:
    """Output: a gender as displayed to the user."""

    id: str
    name: str


@dataclass(frozen=True)
class ErrorDTO:
    """Output: an operational failure, reduced to what a caller may see."""

    type: str
    message: str


@dataclass(frozen=True)
class ResponseDTO:
    """Output: one response per lookup.

    ``payload`` is the found entity for 200, an ErrorDTO for 500 and
    None for 404.
    """

    status: int
    payload: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300
