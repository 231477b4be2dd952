#!/usr/bin/env python3
"""
Round-trip YAML loader for axis state files.
Comments and key order in hand-edited files survive a load/save cycle.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for YAML loader with comment preservation."""
    preserve_quotes: bool
    default_flow_style: bool

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...

    def dump(self, data: object, stream: TextIO) -> None:
        """Dump YAML to stream."""
        ...


def _create_yaml_loader() -> YAMLLoader:
    """Create the shared round-trip YAML instance."""
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    return cast(YAMLLoader, yaml_obj)


yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigDict:
    """Load a YAML mapping from disk.

    ruamel.yaml's round-trip load() does not construct arbitrary Python
    objects, so state files are safe to read.

    Args:
        file_path: Path to YAML file to load

    Returns:
        Mapping loaded from YAML (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        raw: ConfigValue = yaml.load(f)
    if raw is None:
        return {}
    return cast(ConfigDict, raw)


def save_yaml_file(data: ConfigDict, file_path: Path) -> None:
    """Save data to YAML file with comment preservation.

    Args:
        data: Mapping to save
        file_path: Path to YAML file to write
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open('w', encoding='utf-8') as f:
        yaml.dump(data, f)
