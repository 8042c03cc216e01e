"""
errors.py - Randomizer Error Kinds
"""

from pathlib import Path
from typing import List, Optional, Sequence


class RandomizeError(Exception):
    """Base class for all randomizer errors"""


class DirectoryNotFound(RandomizeError):
    """Target directory does not exist"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory does not exist: {path}")


class NotADirectory(RandomizeError):
    """Target path exists but is not a directory"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path is not a directory: {path}")


class ScanFailed(RandomizeError):
    """A directory in scope could not be listed"""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause}")


class RenameFailed(RandomizeError):
    """
    The move of a single file failed

    Files renamed before the failure stay renamed; their records are
    available in ``records``.
    """

    def __init__(
        self,
        old_path: Path,
        new_path: Path,
        cause: OSError,
        records: Optional[Sequence] = None
    ):
        self.old_path = old_path
        self.new_path = new_path
        self.cause = cause
        self.records: List = list(records or [])
        super().__init__(f"Failed to rename {old_path} -> {new_path}: {cause}")


class CollisionRetryExhausted(RandomizeError):
    """
    No free random name found within the attempt cap

    Like RenameFailed, ``records`` holds the renames completed before it.
    """

    def __init__(self, path: Path, attempts: int, records: Optional[Sequence] = None):
        self.path = path
        self.attempts = attempts
        self.records: List = list(records or [])
        super().__init__(f"Cannot find available name for {path} (tried {attempts} times)")
