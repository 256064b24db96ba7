"""Shared pytest fixtures and test helpers for pastelaria tests."""

from __future__ import annotations

import base64
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pastelaria.config.settings import PastelSettings
from pastelaria.infrastructure.datastore import DataStore

# 16x16 PNG used as the canonical inline photo.
PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAABAAAAAQCAYAAAAf8/9hAAAABHNCSVQICAgIfAhkiAAAAAlwSFlzAAAAXQAAAF0BVWAu"
    "lAAAABl0RVh0U29mdHdhcmUAd3d3Lmlua3NjYXBlLm9yZ5vuPBoAAADfSURBVDiNpdK9LkRBFADg76yfRJRKiSi9ghfw"
    "HBoR/RYiiEJBNGoakY3oPIBOo1QrJBokCoUXOJoh17XrzjLJFDNzvjlnciYy039Gb1wQEb2IOIyIl4jYlJnVsyQ8Q5b5"
    "NC4+b+DETi2ewKCFjzJTLb5o4YOv8w48icsW3v8W03HBcQvv/YgZAaewjkU8FLw9NHYInsFVQSdYwMbIKhtwCTcl43Oj"
    "7JVfn9no8T1Wy3oOr+h3dqmAXZw2qpnFG6Yr2qyPd8yXjWVcY1D1yQpawy0ecYetmuyZKT7L+Ov4AOVwwJdv6ZjEAAAA"
    "AElFTkSuQmCC"
)
PNG_BYTES = base64.b64decode(PNG_BASE64)
PNG_DATA_URI = f"data:image/png;base64,{PNG_BASE64}"

# Truncated body: not a multiple of four characters.
INVALID_DATA_URI = "data:image/png;base64,iVBORw0KGgoAAAANSUhYXBlLm9yZ5vuPBoAAADfSURBVDiNpdK9LkRBFA"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PastelSettings:
    """Settings rooted at a temp directory with no config file or env overrides."""
    monkeypatch.delenv("PASTELARIA_CONFIG", raising=False)
    return PastelSettings.from_cli(root=tmp_path)


@pytest.fixture
def store(settings: PastelSettings) -> Iterator[DataStore]:
    """Fully initialized data store on a temp directory."""
    s = DataStore(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated data root.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    monkeypatch.delenv("PASTELARIA_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


def image_files(store: DataStore) -> list[Path]:
    """Stored image files, excluding temp files."""
    directory = store.images.directory
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if not p.name.startswith("."))
