"""Configuration management for rnboot."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LauncherSettings(BaseSettings):
    """Launcher configuration loaded from RNBOOT_* environment variables."""

    # Framework being bootstrapped
    framework_package: str = "react-native"
    framework_display_name: str = "React Native"
    docs_url: str = "https://facebook.github.io/react-native/docs/getting-started.html"

    # External tools
    package_manager: str = "npm"
    node_binary: str = "node"

    # Layout of an installed project
    dependency_dir: str = "node_modules"
    cli_module: str = "cli.js"

    # None means wait for the package manager indefinitely
    install_timeout: Optional[float] = Field(None, gt=0)

    # Logging configuration
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="RNBOOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"RNBOOT_LOG_LEVEL must be one of {allowed}, got: {v}")
        return v_upper

    @property
    def reserved_names(self) -> tuple[str, ...]:
        """Project names that would clash with the framework itself."""
        return ("React",)

    @property
    def start_script(self) -> str:
        """The `start` script written into new project manifests."""
        return f"node {self.dependency_dir}/{self.framework_package}/local-cli/cli.js start"

    def framework_dir(self, cwd: Path) -> Path:
        """Directory the package manager installs the framework into."""
        return cwd / self.dependency_dir / self.framework_package

    def install_command_display(self) -> str:
        """Human readable form of the install command, for messages."""
        return f"{self.package_manager} install --save {self.framework_package}"


def load_environment() -> None:
    """Load environment variables from .env files.

    Priority: working directory .env > home .env
    """
    home_env = Path.home() / ".env"
    cwd_env = Path.cwd() / ".env"

    if home_env.exists():
        load_dotenv(home_env)
    if cwd_env.exists():
        load_dotenv(cwd_env, override=True)
