"""Debug utilities."""

from __future__ import annotations
import os

DEBUG_ENV_VAR = "OFFAXIS_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix_info(name: str, matrix):
    """Print a compact summary of a 4x4 matrix."""
    if is_debug_enabled():
        rows = ["[" + ", ".join(f"{v: .4f}" for v in row) + "]" for row in matrix]
        print(f"[{name}] dtype={matrix.dtype}")
        for row in rows:
            print(f"    {row}")
