"""Copy the bundled template tree into a new project folder.

Usage:
    >>> from axis_vex.core.materializer import materialize
    >>> result = materialize(template_root, Path("~/robots/worlds-bot").expanduser())
    >>> if not result.ok:
    ...     print(result.reason)

The target must be missing or an empty directory; it is never merged into.
Entries named in ``SKIP_ENTRIES`` are dropped at every depth. Symbolic links
and special files (FIFOs, sockets, devices) are skipped, not followed.
A failed copy is not rolled back.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from axis_vex.helpers.helpers_logging import print_debug

SKIP_ENTRIES: frozenset[str] = frozenset({".git", ".vsix", "node_modules", "out", "build"})

NOT_A_FOLDER_MESSAGE = "Destination exists and is not a folder."
NOT_EMPTY_MESSAGE = "Destination folder is not empty."


class MaterializeError(Exception):
    """A scaffold precondition or copy step failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of :func:`materialize`.

    Attributes:
        target: Destination folder.
        ok: True when the whole tree was copied.
        reason: Human-readable failure reason (empty on success).
        files_copied: Number of regular files written.
    """

    target: Path
    ok: bool
    reason: str = ""
    files_copied: int = 0


def ensure_empty_directory(target_path: Path) -> None:
    """Make sure ``target_path`` is an empty directory, creating it if missing.

    Raises:
        MaterializeError: If the path is a file or a non-empty directory.
        OSError: If the directory cannot be inspected or created.
    """
    try:
        is_dir = target_path.is_dir()
        exists = is_dir or target_path.exists()
    except OSError as e:
        raise MaterializeError(str(e)) from e

    if not exists:
        target_path.mkdir(parents=True, exist_ok=True)
        print_debug(f"Created destination {target_path}")
        return

    if not is_dir:
        raise MaterializeError(NOT_A_FOLDER_MESSAGE)

    with os.scandir(target_path) as entries:
        if next(entries, None) is not None:
            raise MaterializeError(NOT_EMPTY_MESSAGE)


def copy_template_tree(source: Path, destination: Path) -> int:
    """Recursively copy ``source`` into ``destination``, depth first.

    Args:
        source: Directory to copy from.
        destination: Directory to copy into (created if missing).

    Returns:
        Number of regular files copied.

    Raises:
        OSError: On any read/write failure. Already-copied entries stay.
    """
    destination.mkdir(parents=True, exist_ok=True)
    copied = 0

    with os.scandir(source) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        if entry.name in SKIP_ENTRIES:
            print_debug(f"Skipped (excluded): {entry.path}")
            continue

        src_path = Path(entry.path)
        dest_path = destination / entry.name

        if entry.is_symlink():
            print_debug(f"Skipped (symlink): {entry.path}")
        elif entry.is_dir(follow_symlinks=False):
            copied += copy_template_tree(src_path, dest_path)
        elif entry.is_file(follow_symlinks=False):
            shutil.copyfile(src_path, dest_path)
            copied += 1
        else:
            print_debug(f"Skipped (special file): {entry.path}")

    return copied


def materialize(template_root: Path, target_path: Path) -> MaterializeResult:
    """Check the destination, then copy the template tree into it.

    Never raises for filesystem problems: preconditions and I/O errors come
    back as a failed :class:`MaterializeResult` with the reason text.
    """
    try:
        if not template_root.is_dir():
            raise MaterializeError(f"Template not found: {template_root}")
        ensure_empty_directory(target_path)
        files_copied = copy_template_tree(template_root, target_path)
    except MaterializeError as e:
        return MaterializeResult(target=target_path, ok=False, reason=e.message)
    except OSError as e:
        reason = e.strerror or str(e)
        if e.filename:
            reason = f"{reason}: {e.filename}"
        return MaterializeResult(target=target_path, ok=False, reason=reason)

    return MaterializeResult(target=target_path, ok=True, files_copied=files_copied)
