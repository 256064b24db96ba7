"""Tests for PastelSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from pastelaria.config.settings import PastelSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PASTELARIA_CONFIG", "PASTELARIA_ROOT", "PASTELARIA_STORAGE__IMAGE_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PastelSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.database.filename == "pastelaria.db"
        assert settings.storage.image_dir == "img"
        assert settings.storage_root == tmp_path / "storage"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PastelSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = PastelSettings.from_cli(root=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pastelaria.toml").write_text(
            '[database]\nfilename = "shop.db"\n[storage]\nimage_dir = "photos"\n'
        )
        settings = PastelSettings.from_cli(root=tmp_path)
        assert settings.database.filename == "shop.db"
        assert settings.storage.image_dir == "photos"
        assert settings.storage.default_extension == "bin"  # default preserved

    def test_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "pastelaria.toml").write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = PastelSettings.from_cli()
        assert settings.root == tmp_path
        assert settings.config_path == tmp_path / "pastelaria.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[storage]\ndirectory = "media"\n')
        settings = PastelSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.storage.directory == "media"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pastelaria.toml").write_text("[database\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PastelSettings.from_cli(root=tmp_path)


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pastelaria.toml").write_text('[storage]\nimage_dir = "photos"\n')
        monkeypatch.setenv("PASTELARIA_STORAGE__IMAGE_DIR", "pics")
        settings = PastelSettings.from_cli(root=tmp_path)
        assert settings.storage.image_dir == "pics"
