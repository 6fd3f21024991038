"""Tests for launcher configuration."""

from pathlib import Path

import pytest

from rnboot.core.config import LauncherSettings, load_environment


class TestLauncherSettings:
    """Test LauncherSettings class."""

    def test_default_values(self, settings):
        """Test that default values are set correctly."""
        assert settings.framework_package == "react-native"
        assert settings.package_manager == "npm"
        assert settings.node_binary == "node"
        assert settings.dependency_dir == "node_modules"
        assert settings.cli_module == "cli.js"
        assert settings.install_timeout is None
        assert settings.log_level == "WARNING"

    def test_start_script(self, settings):
        """Test the start script points into the installed framework."""
        assert settings.start_script == "node node_modules/react-native/local-cli/cli.js start"

    def test_reserved_names(self, settings):
        assert settings.reserved_names == ("React",)

    def test_framework_dir(self, settings, tmp_path):
        assert settings.framework_dir(tmp_path) == tmp_path / "node_modules" / "react-native"

    def test_env_override(self, monkeypatch):
        """Test RNBOOT_* environment variables override defaults."""
        monkeypatch.setenv("RNBOOT_PACKAGE_MANAGER", "yarn")
        monkeypatch.setenv("RNBOOT_INSTALL_TIMEOUT", "600")

        settings = LauncherSettings(_env_file=None)

        assert settings.package_manager == "yarn"
        assert settings.install_timeout == 600
        assert settings.install_command_display() == "yarn install --save react-native"

    def test_log_level_validation(self):
        """Test log level validation."""
        # Case insensitive
        settings = LauncherSettings(_env_file=None, log_level="debug")
        assert settings.log_level == "DEBUG"

        # Invalid log level should raise ValueError
        with pytest.raises(ValueError, match="RNBOOT_LOG_LEVEL must be one of"):
            LauncherSettings(_env_file=None, log_level="LOUD")

    def test_install_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            LauncherSettings(_env_file=None, install_timeout=0)


class TestLoadEnvironment:
    """Test .env loading."""

    def test_cwd_env_overrides_home_env(self, tmp_path, monkeypatch):
        """Test that the working directory .env takes precedence."""
        home = tmp_path / "home"
        work = tmp_path / "work"
        home.mkdir()
        work.mkdir()
        (home / ".env").write_text("RNBOOT_NODE_BINARY=home-node\n")
        (work / ".env").write_text("RNBOOT_NODE_BINARY=work-node\n")

        # Registered so the value load_environment() sets is removed afterwards
        monkeypatch.setenv("RNBOOT_NODE_BINARY", "")
        monkeypatch.delenv("RNBOOT_NODE_BINARY")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
        monkeypatch.chdir(work)

        load_environment()

        assert LauncherSettings(_env_file=None).node_binary == "work-node"

    def test_missing_env_files(self, tmp_path, monkeypatch):
        """Test that missing .env files are not an error."""
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "nowhere"))
        monkeypatch.chdir(tmp_path)

        load_environment()
