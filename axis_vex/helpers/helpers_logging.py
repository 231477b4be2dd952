"""Simple logging helpers for the axis CLI."""

import os


def _color_enabled() -> bool:
    """Colours are on unless NO_COLOR is set (any value)."""
    return "NO_COLOR" not in os.environ


def debug_enabled() -> bool:
    """Return True when AXIS_DEBUG asks for verbose diagnostics."""
    return os.environ.get("AXIS_DEBUG", "").strip().lower() in {"1", "true", "yes"}


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKCYAN = '\033[96m'
    CYAN = '\033[96m'  # Alias for OKCYAN
    OKGREEN = '\033[92m'
    GREEN = '\033[92m'  # Alias for OKGREEN
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def _paint(prefix: str, msg: str) -> str:
    if not _color_enabled():
        return msg
    return f"{prefix}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(_paint(f"{Colors.HEADER}{Colors.BOLD}", msg))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(Colors.OKCYAN, msg))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(Colors.OKGREEN, f"✓ {msg}"))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(Colors.YELLOW, f"⚠️  {msg}"))


def print_error(msg: str) -> None:
    """Print an error message."""
    print(_paint(Colors.RED, f"❌ {msg}"))


def print_dim(msg: str) -> None:
    """Print a de-emphasised message."""
    print(_paint(Colors.DIM, msg))


def print_debug(msg: str) -> None:
    """Print a diagnostic message when AXIS_DEBUG is set."""
    if debug_enabled():
        print_dim(f"[debug] {msg}")
