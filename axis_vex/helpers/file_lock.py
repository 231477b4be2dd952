"""Advisory OS file locks guarding a scaffold target.

Two ``axis create`` runs aimed at the same folder would interleave
directory creation. Each run holds a non-blocking exclusive lock keyed by
the resolved target path for the duration of copy + stamp. Lock files live
under ``<AXIS_HOME>/locks`` so the target itself stays empty until the copy.
"""

from __future__ import annotations

import contextlib
import hashlib
import os
from collections.abc import Iterator
from pathlib import Path
from typing import IO


class LockUnavailableError(RuntimeError):
    """Raised when a non-blocking lock cannot be acquired."""


def _ensure_lock_region(f: IO[bytes]) -> None:
    """Ensure the lock file has at least 1 byte so region locks work on Windows."""
    f.seek(0, os.SEEK_END)
    if f.tell() <= 0:
        f.write(b"\0")
        f.flush()
    f.seek(0)


def _lock_posix(fd: int) -> None:
    import fcntl  # POSIX only

    fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)


def _unlock_posix(fd: int) -> None:
    import fcntl  # POSIX only

    fcntl.flock(fd, fcntl.LOCK_UN)


def _lock_windows(fd: int) -> None:
    import msvcrt  # Windows only

    msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)


def _unlock_windows(fd: int) -> None:
    import msvcrt  # Windows only

    msvcrt.locking(fd, msvcrt.LK_UNLCK, 1)


def lock_path_for(locks_dir: Path, target: Path) -> Path:
    """Return the lock file used for ``target``."""
    key = hashlib.sha1(str(target.resolve()).encode("utf-8")).hexdigest()
    return locks_dir / f"{key}.lock"


def acquire_lockfile(path: Path) -> IO[bytes]:
    """Open + lock a lockfile without blocking. Keep the handle open to hold it.

    Raises:
        LockUnavailableError: If another process holds the lock.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    f = path.open("r+b") if path.exists() else path.open("w+b")
    try:
        _ensure_lock_region(f)
        if os.name == "nt":
            _lock_windows(f.fileno())
        else:
            _lock_posix(f.fileno())
    except OSError as e:
        f.close()
        raise LockUnavailableError(str(e)) from e
    return f


def release_lockfile(f: IO[bytes]) -> None:
    """Release a lockfile acquired via acquire_lockfile."""
    with contextlib.suppress(OSError):
        if os.name == "nt":
            _unlock_windows(f.fileno())
        else:
            _unlock_posix(f.fileno())
    f.close()


@contextlib.contextmanager
def target_lock(locks_dir: Path, target: Path) -> Iterator[Path]:
    """Hold the scaffold lock for ``target`` while the block runs.

    Yields:
        The lock file path.

    Raises:
        LockUnavailableError: If another scaffold is writing to ``target``.
    """
    lock_file = lock_path_for(locks_dir, target)
    handle = acquire_lockfile(lock_file)
    try:
        yield lock_file
    finally:
        release_lockfile(handle)
