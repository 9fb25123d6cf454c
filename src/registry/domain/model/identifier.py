"""Gender identifiers.

Identifiers are plain UUIDs. The nil UUID is reserved: it is what an
unset id looks like, so it can never be the key of a stored entity.
"""

from __future__ import annotations

from uuid import UUID

EMPTY_ID = UUID(int=0)


def validate_identifier(raw: UUID) -> UUID | None:
    """Return *raw* unchanged, or None if it is the reserved empty id.

    Only the sentinel is rejected; no other format checks are made.
    """
    if raw == EMPTY_ID:
        return None
    return raw
