"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pastelaria.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "pastelaria.db"
    echo: bool = False


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    directory: str = "storage"
    image_dir: str = "img"
    default_extension: str = "bin"


class PastelConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
