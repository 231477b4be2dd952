"""Tests for configuration resolution (defaults, config.yaml, env vars)."""

from __future__ import annotations

from pathlib import Path

import pytest

from axis_vex.helpers.config import (
    ConfigError,
    axis_home as resolve_axis_home,
    bundled_template_root,
    load_config,
)


def _write_config(home: Path, content: str) -> None:
    home.mkdir(parents=True, exist_ok=True)
    (home / "config.yaml").write_text(content, encoding="utf-8")


def test_axis_home_comes_from_env(axis_home: Path) -> None:
    assert load_config().home == axis_home.resolve()


def test_axis_home_defaults_to_dot_axis(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AXIS_HOME")

    assert resolve_axis_home() == (Path.home() / ".axis").resolve()


def test_defaults_without_config_file(axis_home: Path) -> None:
    config = load_config()

    assert config.template_root == bundled_template_root()
    assert config.default_project_name == "vex-competition"
    assert config.build_command == ["make"]
    assert config.open_command == ["code", "--new-window"]
    assert config.max_remembered_projects == 20
    assert config.projects_file == axis_home.resolve() / "projects.yaml"


def test_bundled_template_is_a_vex_project() -> None:
    root = bundled_template_root()

    assert (root / "makefile").is_file()
    assert (root / "vex").is_dir()
    assert (root / ".vscode" / "vex_project_settings.json").is_file()


def test_config_file_overrides_defaults(axis_home: Path, tmp_path: Path) -> None:
    _write_config(
        axis_home,
        f"template_root: {tmp_path / 'team-template'}\n"
        "default_project_name: worlds-bot\n"
        "build_command: make -j4\n"
        "open_command: [codium]\n"
        "max_remembered_projects: 5\n",
    )

    config = load_config()

    assert config.template_root == tmp_path / "team-template"
    assert config.default_project_name == "worlds-bot"
    assert config.build_command == ["make", "-j4"]
    assert config.open_command == ["codium"]
    assert config.max_remembered_projects == 5


def test_env_overrides_config_file(
    axis_home: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _write_config(axis_home, "build_command: make\n")
    monkeypatch.setenv("AXIS_BUILD_COMMAND", "pros make")
    monkeypatch.setenv("AXIS_OPEN_COMMAND", "subl -n")

    config = load_config()

    assert config.build_command == ["pros", "make"]
    assert config.open_command == ["subl", "-n"]


def test_unparsable_config_warns_and_uses_defaults(
    axis_home: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    _write_config(axis_home, "build_command: [unclosed\n")

    config = load_config()

    assert config.build_command == ["make"]
    assert "Ignoring unreadable config" in capsys.readouterr().out


@pytest.mark.parametrize(
    "content",
    [
        "build_command: 42\n",
        "build_command: []\n",
        "open_command: [code, 1]\n",
        "max_remembered_projects: 0\n",
        "max_remembered_projects: true\n",
        "default_project_name: [a, b]\n",
        "template_root: ''\n",
    ],
)
def test_wrong_types_raise_config_error(axis_home: Path, content: str) -> None:
    _write_config(axis_home, content)

    with pytest.raises(ConfigError):
        load_config()
