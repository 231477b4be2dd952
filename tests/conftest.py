"""Shared fixtures for the axis test suite.

Every test gets an isolated ``AXIS_HOME`` so the real registry, config and
lock files are never touched. ``make_template`` builds throwaway template
trees; ``make_vex_project`` builds folders that qualify as VEX projects.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from axis_vex.helpers.config import AxisConfig

MakeTemplate = Callable[..., Path]
MakeVexProject = Callable[..., Path]

# Default template content used by the factory.
_DEFAULT_TEMPLATE_FILES: dict[str, str] = {
    "makefile": "include vex/mkenv.mk\n",
    "vex/mkenv.mk": "PLATFORM = vexv5\n",
    "src/main.cpp": "int main() { return 0; }\n",
    ".vscode/vex_project_settings.json": json.dumps(
        {"project": {"name": "template", "description": "", "creationDate": ""}},
        indent=2,
    ),
}


@pytest.fixture(autouse=True)
def axis_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point AXIS_HOME at a temp dir and disable colours and env overrides."""
    home = tmp_path / "axis-home"
    monkeypatch.setenv("AXIS_HOME", str(home))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("AXIS_DEBUG", raising=False)
    monkeypatch.delenv("AXIS_BUILD_COMMAND", raising=False)
    monkeypatch.delenv("AXIS_OPEN_COMMAND", raising=False)
    return home


@pytest.fixture()
def make_template(tmp_path: Path) -> MakeTemplate:
    """Return a factory writing a template tree under ``tmp_path``.

    Usage::

        root = make_template(files={"src/main.c": "int x;"})
    """

    def _make(
        files: dict[str, str | bytes] | None = None,
        name: str = "template",
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        content = _DEFAULT_TEMPLATE_FILES if files is None else files
        for relative, data in content.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(data, bytes):
                path.write_bytes(data)
            else:
                path.write_text(data, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def make_vex_project(tmp_path: Path) -> MakeVexProject:
    """Return a factory creating folders with optional makefile/vex markers."""

    def _make(name: str, *, makefile: bool = True, vex_dir: bool = True) -> Path:
        root = tmp_path / "projects" / name
        root.mkdir(parents=True, exist_ok=True)
        if makefile:
            (root / "makefile").write_text("all:\n", encoding="utf-8")
        if vex_dir:
            (root / "vex").mkdir(exist_ok=True)
        return root.resolve()

    return _make


@pytest.fixture()
def axis_config(axis_home: Path, make_template: MakeTemplate) -> AxisConfig:
    """Configuration pointing at a temp template and the isolated home."""
    return AxisConfig(
        home=axis_home,
        template_root=make_template(),
        build_command=["make"],
        open_command=["code", "--new-window"],
    )
