"""Tests for top-level CLI main() error/abort handling."""

from __future__ import annotations

from unittest.mock import patch

import click
import pytest

from axis_vex.cli import commands


class TestCommandsMainAbortHandling:
    """Ensure Ctrl-C style aborts produce friendly output without traceback."""

    def test_main_handles_click_abort_with_friendly_message(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """click.Abort should return 130 and print a friendly cancellation message."""
        with patch("sys.argv", ["axis", "create"]), patch.object(
            commands._click_cli,
            "main",
            side_effect=click.Abort(),
        ):
            result = commands.main()

        assert result == 130
        assert "Cancelled by user" in capsys.readouterr().out

    def test_main_handles_click_exception(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exc = click.ClickException("boom")
        with patch("sys.argv", ["axis", "projects"]), patch.object(
            commands._click_cli,
            "main",
            side_effect=exc,
        ):
            result = commands.main()

        assert result == exc.exit_code
        assert "Error: boom" in capsys.readouterr().err

    def test_main_returns_command_exit_code(self) -> None:
        with patch("sys.argv", ["axis", "build"]), patch.object(
            commands._click_cli,
            "main",
            return_value=2,
        ):
            assert commands.main() == 2

    def test_main_without_command_prints_help(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("sys.argv", ["axis"]):
            result = commands.main()

        assert result == 0
        output = capsys.readouterr().out
        assert "axis <command> [options]" in output
        assert "State directory:" in output


def test_aliases_point_at_canonical_commands() -> None:
    for alias, canonical in commands.COMMAND_ALIASES.items():
        assert commands._click_cli.commands[alias] is commands.CLICK_COMMANDS[canonical]


class TestCommandsMainLocale:
    """Creation dates use %c, which only follows the user's locale once LC_TIME is set."""

    def test_main_sets_time_locale_from_environment(self) -> None:
        with patch("sys.argv", ["axis", "devices"]), patch.object(
            commands._click_cli,
            "main",
            return_value=0,
        ), patch("axis_vex.cli.commands.locale.setlocale") as setlocale:
            commands.main()

        setlocale.assert_called_once_with(commands.locale.LC_TIME, "")

    def test_unsupported_locale_is_not_fatal(self) -> None:
        with patch("sys.argv", ["axis", "devices"]), patch.object(
            commands._click_cli,
            "main",
            return_value=0,
        ), patch(
            "axis_vex.cli.commands.locale.setlocale",
            side_effect=commands.locale.Error("unsupported locale setting"),
        ):
            assert commands.main() == 0
