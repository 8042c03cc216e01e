"""
scan_files.py - File Scanning Module

Provides recursive and non-recursive collection of rename candidates.

Only regular files are candidates. Symlinks are skipped whatever they point
to, and the recursive walk never follows symlinked directories. Entries are
visited in name order so a fixed directory tree always yields the same list.
A directory that cannot be listed fails the scan in both modes.
"""

from pathlib import Path
from typing import List
import logging
import os
import stat

from .errors import ScanFailed

logger = logging.getLogger(__name__)


def is_candidate(path: Path) -> bool:
    """
    Check whether a path is a regular, non-symlink file

    Args:
        path: Path to check

    Returns:
        Whether the path may be renamed
    """
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        # Vanished between listing and inspection
        return False
    return stat.S_ISREG(mode)


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def _raise_scan_error(error: OSError) -> None:
    raise ScanFailed(Path(error.filename or ""), error) from error


def scan_directory(directory: Path, include_hidden: bool = False) -> List[Path]:
    """
    Scan single directory (non-recursive)

    Args:
        directory: Target directory
        include_hidden: Whether to include hidden files

    Returns:
        File list

    Raises:
        ScanFailed: The directory cannot be listed
    """
    directory = Path(directory)
    results: List[Path] = []

    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise ScanFailed(directory, e) from e

    for name in names:
        if not include_hidden and _is_hidden(name):
            continue

        item = directory / name
        if not is_candidate(item):
            logger.debug("Skipping non-regular entry: %s", item)
            continue

        results.append(item)

    return results


def scan_recursive(root: Path, include_hidden: bool = False) -> List[Path]:
    """
    Recursively scan folder for files

    Files of a directory come before the files of its subdirectories.

    Args:
        root: Root directory
        include_hidden: Whether to include hidden files and directories

    Returns:
        File list

    Raises:
        ScanFailed: The root or a subdirectory cannot be listed
    """
    results: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_scan_error):
        current_dir = Path(dirpath)

        # Modifying dirnames in place controls both pruning and visit order
        dirnames[:] = sorted(
            d for d in dirnames
            if include_hidden or not _is_hidden(d)
        )

        for filename in sorted(filenames):
            if not include_hidden and _is_hidden(filename):
                continue

            filepath = current_dir / filename
            if not is_candidate(filepath):
                logger.debug("Skipping non-regular entry: %s", filepath)
                continue

            results.append(filepath)

    return results


def collect_files(
    root: Path,
    recursive: bool = False,
    include_hidden: bool = False
) -> List[Path]:
    """
    Collect rename candidates under root

    Args:
        root: Validated target directory
        recursive: Whether to descend into subdirectories
        include_hidden: Whether to include hidden entries

    Returns:
        Candidate files in deterministic traversal order

    Raises:
        ScanFailed: A directory in scope cannot be listed
    """
    if recursive:
        return scan_recursive(root, include_hidden=include_hidden)
    return scan_directory(root, include_hidden=include_hidden)
