"""Shared fixtures for end-to-end CLI tests.

Every CLI test runs the real ``axis`` click group through
``click.testing.CliRunner`` inside an isolated working directory, so the
full chain is exercised: command parsing → handler → core → filesystem.

``run_axis`` invokes with ``standalone_mode=False`` so the handler's integer
exit code is available as ``result.return_value``.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from axis_vex.cli.commands import _click_cli

# Type alias for the callable fixture.
RunAxis = Callable[..., Result]


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated working directory and cd into it.

    Yields:
        Path to the temporary working directory.

    After the test, the working directory is restored.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    original_cwd = Path.cwd()
    os.chdir(workdir)
    try:
        yield workdir
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_axis(isolated_project: Path) -> RunAxis:
    """Return a helper that invokes ``axis <args>`` in-process.

    Usage in tests::

        def test_devices(run_axis: RunAxis) -> None:
            result = run_axis("devices")
            assert result.return_value == 0

    Returns:
        A callable ``(*args, input=None) -> click.testing.Result``.
    """
    runner = CliRunner()

    def _run(*args: str, input: str | None = None) -> Result:
        return runner.invoke(
            _click_cli,
            list(args),
            input=input,
            standalone_mode=False,
            catch_exceptions=False,
        )

    return _run
