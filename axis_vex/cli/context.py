"""Per-invocation state shared by axis commands (click ``ctx.obj``)."""

from __future__ import annotations

from typing import cast

import click

from axis_vex.helpers.config import AxisConfig, ConfigError, load_config

_CONFIG_KEY = "config"


def get_config(obj: dict[str, object] | None) -> AxisConfig:
    """Return the configuration stored on the context, loading it once.

    Raises:
        click.ClickException: If config.yaml holds an invalid value.
    """
    if obj is not None and isinstance(obj.get(_CONFIG_KEY), AxisConfig):
        return cast(AxisConfig, obj[_CONFIG_KEY])

    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    if obj is not None:
        obj[_CONFIG_KEY] = config
    return config
