"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Move a single file to its new name
- Turn OS errors into RenameFailed
"""

from pathlib import Path
import os

from .errors import RenameFailed


def execute_rename(src: Path, dst: Path) -> None:
    """
    Rename src to dst in place

    Args:
        src: Source path
        dst: Destination path (same directory, checked free by the caller)

    Raises:
        RenameFailed: The move failed; the caller attaches completed records
    """
    try:
        os.rename(src, dst)
    except OSError as e:
        raise RenameFailed(src, dst, e) from e
