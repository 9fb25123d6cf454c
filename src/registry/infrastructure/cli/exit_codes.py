"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0

NOT_FOUND: int = 1
"""The gender does not exist, or a domain rule rejected the command."""

SERVER_ERROR: int = 3
"""The lookup failed. Kept apart from click's own usage-error code (2)."""
