"""
safety_checks.py - Safety Check Module

Provides checks performed before any file is touched
"""

from pathlib import Path
from typing import Tuple, Optional
import os

from .errors import DirectoryNotFound, NotADirectory


def validate_directory(directory: Path) -> None:
    """
    Validate the randomizer target

    Args:
        directory: Target directory

    Raises:
        DirectoryNotFound: Path does not exist
        NotADirectory: Path exists but is not a directory
    """
    if not os.path.exists(directory):
        raise DirectoryNotFound(directory)

    if not os.path.isdir(directory):
        raise NotADirectory(directory)


def check_writable(directory: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if entries in a directory can be renamed

    Args:
        directory: Directory to check

    Returns:
        (is_writable, error_reason)
    """
    if not os.access(directory, os.W_OK | os.X_OK):
        return False, f"Directory is not writable: {directory}"
    return True, None
