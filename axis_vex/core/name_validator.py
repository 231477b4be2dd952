"""Project name validation.

A project name becomes a folder name and a JSON string value, so it is
restricted to letters, digits, dot, underscore and dash.
"""

from __future__ import annotations

import re

_INVALID_CHAR_RE = re.compile(r"[^A-Za-z0-9._-]")

EMPTY_NAME_MESSAGE = "Please enter a project name."
INVALID_CHARS_MESSAGE = "Use letters, numbers, dot, underscore, or dash only."


def project_name_error(raw: str) -> str | None:
    """Return the inline validation message for ``raw``, or None if it is valid."""
    if not raw.strip():
        return EMPTY_NAME_MESSAGE
    if _INVALID_CHAR_RE.search(raw):
        return INVALID_CHARS_MESSAGE
    return None


def validate_project_name(raw: str) -> str | None:
    """Return the project name, or None when it is rejected.

    Surrounding whitespace is outside the allow-list, so an accepted name is
    already trimmed.
    """
    if project_name_error(raw) is not None:
        return None
    return raw
