"""Shared pytest fixtures for rnboot tests."""

import json
from pathlib import Path
from typing import Optional

import pytest

from rnboot.core.config import LauncherSettings
from rnboot.core.context import LaunchContext


class ScriptedAnswers:
    """Stand-in for the terminal prompt that replays canned answers."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, message: str, default: str) -> str:
        self.questions.append(message)
        if not self.answers:
            return default
        return self.answers.pop(0)


def install_fake_framework(
    project_dir: Path,
    version: str = "0.20.0",
    engines: Optional[dict] = None,
    with_cli: bool = True,
) -> Path:
    """Create node_modules/react-native as npm would leave it.

    Returns:
        Path to the framework directory
    """
    framework_dir = project_dir / "node_modules" / "react-native"
    framework_dir.mkdir(parents=True, exist_ok=True)

    package = {"name": "react-native", "version": version}
    if engines is not None:
        package["engines"] = engines
    (framework_dir / "package.json").write_text(json.dumps(package))

    if with_cli:
        (framework_dir / "cli.js").write_text("module.exports = {run() {}, init() {}};\n")
    return framework_dir


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep RNBOOT_* variables and ~/.env of the real environment out of tests.

    Every settings variable is registered with monkeypatch, so values that
    load_environment() writes into os.environ are removed afterwards.
    """
    for field_name in LauncherSettings.model_fields:
        key = f"RNBOOT_{field_name.upper()}"
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))


@pytest.fixture
def settings() -> LauncherSettings:
    """Settings with defaults only, ignoring any .env file."""
    return LauncherSettings(_env_file=None)


@pytest.fixture
def answers() -> ScriptedAnswers:
    return ScriptedAnswers()


@pytest.fixture
def launch_ctx(tmp_path, monkeypatch, settings, answers) -> LaunchContext:
    """A launch context rooted in a temporary working directory.

    The real working directory is switched to tmp_path and restored after
    the test, since initialization changes it.
    """
    monkeypatch.chdir(tmp_path)
    return LaunchContext(
        argv=[],
        cwd=tmp_path,
        settings=settings,
        platform="linux",
        ask=answers,
    )


@pytest.fixture
def fake_framework():
    """Factory that lays out an installed framework under a directory."""
    return install_fake_framework
