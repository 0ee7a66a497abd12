"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from linkcheck import APP_NAME
from linkcheck.core.paths import ensure_config_dir, get_config_dir, get_config_path


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestConfigPath:
    """Tests for get_config_path and ensure_config_dir."""

    def test_config_path(self, tmp_path: Path) -> None:
        """The config file lives in the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"

    def test_ensure_config_dir(self, tmp_path: Path) -> None:
        """ensure_config_dir creates the directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = ensure_config_dir()

        assert result.is_dir()
        assert result == tmp_path / APP_NAME
