"""
filename_randomizer - Rename every file in a directory to a random name
"""

from .core import (
    Renamer,
    RandomizeOptions,
    RenameRecord,
    RandomizeError,
    DirectoryNotFound,
    NotADirectory,
    ScanFailed,
    RenameFailed,
    CollisionRetryExhausted,
    randomize_directory,
)

__version__ = "1.0.0"

__all__ = [
    "Renamer",
    "RandomizeOptions",
    "RenameRecord",
    "RandomizeError",
    "DirectoryNotFound",
    "NotADirectory",
    "ScanFailed",
    "RenameFailed",
    "CollisionRetryExhausted",
    "randomize_directory",
]
