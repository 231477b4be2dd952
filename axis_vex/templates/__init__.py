"""Project templates bundled with axis (package data)."""
