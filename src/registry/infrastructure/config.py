"""Application configuration — environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``REGISTRY_``-prefixed environment
variable, e.g. ``REGISTRY_DATA_DIR=/var/lib/registry``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_prefix="REGISTRY_")

    data_dir: Path = _DEFAULT_DATA_DIR


@lru_cache
def get_settings() -> Settings:
    return Settings()
