"""Validation utilities for CLI arguments."""

import argparse
from pathlib import Path

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    for file in getattr(args, "files", []):
        path = Path(file)
        if not path.exists():
            return f"Error: Machine file not found: {file}"
        if not path.is_file():
            return f"Error: Not a file: {file}"

    workers = getattr(args, "workers", None)
    if workers is not None and workers < 1:
        return "Error: --workers must be at least 1"

    return None
