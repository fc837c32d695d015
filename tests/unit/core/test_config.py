"""Unit tests for settings and configuration loading.

Tests for the Settings model, config file parsing and the merge of
config file defaults with command-line switches.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from mimels.core.config import (
    BucketOrder,
    FileConfig,
    OutputFormat,
    Settings,
    load_config_file,
    resolve_settings,
)
from mimels.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from pydantic import ValidationError


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Settings default to name-only, newline, hidden entries excluded."""
        settings = Settings()
        assert settings.output_format == OutputFormat.NAME
        assert settings.terminator == "\n"
        assert settings.show_hidden is False
        assert settings.ignore_inaccessible is False
        assert settings.bucket_order == BucketOrder.NEWEST_FIRST
        assert settings.magic_file is None

    def test_frozen(self) -> None:
        """Settings cannot be changed after creation."""
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.show_hidden = True  # type: ignore[misc]

    def test_invalid_terminator(self) -> None:
        """Only newline and null byte are accepted as terminators."""
        with pytest.raises(ValidationError, match="terminator"):
            Settings(terminator=";")


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_missing_default_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing default config file is not an error."""
        with patch(
            "mimels.core.config.get_config_path",
            return_value=tmp_path / "config.toml",
        ):
            config = load_config_file()

        assert config == FileConfig()

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        """A missing explicitly requested file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError, match="not found"):
            load_config_file(tmp_path / "nope.toml")

    def test_loads_all_keys(self, tmp_path: Path) -> None:
        """All supported keys are read, 'all' mapping to show_all."""
        path = tmp_path / "config.toml"
        path.write_text(
            "mime = true\n"
            "null = true\n"
            "all = true\n"
            "ignore_inaccessible = true\n"
            'bucket_order = "discovery"\n'
            'magic_file = "/opt/magic.mgc"\n'
        )

        config = load_config_file(path)

        assert config.mime is True
        assert config.null is True
        assert config.show_all is True
        assert config.ignore_inaccessible is True
        assert config.bucket_order == BucketOrder.DISCOVERY
        assert config.magic_file == Path("/opt/magic.mgc")

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path) -> None:
        """Malformed TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("mime = [")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config_file(path)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Unknown keys are rejected."""
        path = tmp_path / "config.toml"
        path.write_text("colour = true\n")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config_file(path)

    def test_invalid_bucket_order_raises(self, tmp_path: Path) -> None:
        """bucket_order must be one of the known values."""
        path = tmp_path / "config.toml"
        path.write_text('bucket_order = "random"\n')

        with pytest.raises(ConfigError):
            load_config_file(path)

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The default path follows XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        (tmp_path / "mimels").mkdir()
        (tmp_path / "mimels" / "config.toml").write_text("all = true\n")

        assert load_config_file().show_all is True


class TestResolveSettings:
    """Tests for resolve_settings."""

    def test_no_config_no_switches(self) -> None:
        """Without config and switches the defaults apply."""
        assert resolve_settings() == Settings()

    def test_switches(self) -> None:
        """Each switch turns its behavior on."""
        settings = resolve_settings(
            mime=True,
            null=True,
            show_all=True,
            ignore_inaccessible=True,
        )

        assert settings.output_format == OutputFormat.MIME
        assert settings.terminator == "\0"
        assert settings.show_hidden is True
        assert settings.ignore_inaccessible is True

    def test_config_values_apply(self) -> None:
        """Config file values apply when switches are off."""
        config = FileConfig(mime=True, show_all=True, bucket_order=BucketOrder.DISCOVERY)

        settings = resolve_settings(config)

        assert settings.output_format == OutputFormat.MIME
        assert settings.show_hidden is True
        assert settings.terminator == "\n"
        assert settings.bucket_order == BucketOrder.DISCOVERY

    def test_magic_file_passed_through(self) -> None:
        """magic_file from the config reaches the settings."""
        config = FileConfig(magic_file=Path("/opt/magic.mgc"))
        assert resolve_settings(config).magic_file == Path("/opt/magic.mgc")
