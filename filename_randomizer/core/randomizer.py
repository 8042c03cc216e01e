"""
randomizer.py - Renamer

Validate -> collect -> generate -> rename pipeline over one directory
"""

from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union
import logging
import os
import secrets

from .models_fs import RandomizeOptions, RenameRecord
from .errors import RenameFailed, CollisionRetryExhausted
from .gen_names import TokenFactory, generate_random_name
from .safety_checks import validate_directory
from .scan_files import collect_files
from .plan_rename import NameClaims, pick_new_path, MAX_ATTEMPTS
from .exec_rename import execute_rename

logger = logging.getLogger(__name__)


class Renamer:
    """Renames every file in a directory to a random hex name"""

    def __init__(
        self,
        directory: Union[str, Path],
        options: Optional[Union[RandomizeOptions, Mapping[str, Any]]] = None,
        token_factory: TokenFactory = secrets.token_hex,
        **overrides: Any
    ):
        """
        Initialize renamer (no filesystem access)

        Args:
            directory: Target directory, resolved to an absolute path
            options: RandomizeOptions or a mapping of option keys
            token_factory: Randomness source, bytes -> hex string
            overrides: Option values taking precedence over options
        """
        self.directory = Path(os.path.abspath(os.fspath(directory)))

        if isinstance(options, RandomizeOptions):
            if overrides:
                options = RandomizeOptions.from_mapping(vars(options), **overrides)
        else:
            options = RandomizeOptions.from_mapping(options, **overrides)

        self.options: RandomizeOptions = options
        self.token_factory = token_factory
        self.max_attempts = MAX_ATTEMPTS

    def collect_files(self) -> List[Path]:
        """Validate the target and list rename candidates"""
        validate_directory(self.directory)
        return collect_files(
            self.directory,
            recursive=self.options.recursive,
            include_hidden=self.options.include_hidden,
        )

    def generate_random_name(self, original_name: str) -> str:
        """Draw one random name for original_name (no collision check)"""
        return generate_random_name(
            original_name,
            preserve_extensions=self.options.preserve_extensions,
            length=self.options.length,
            token_factory=self.token_factory,
        )

    def randomize(
        self,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> List[RenameRecord]:
        """
        Rename (or preview renaming) every collected file

        Args:
            progress_callback: Progress callback (current, total, message)

        Returns:
            One record per file, in discovery order

        Raises:
            DirectoryNotFound: Target does not exist
            NotADirectory: Target is not a directory
            ScanFailed: A directory in scope cannot be listed
            RenameFailed: A move failed; earlier renames stay in place
            CollisionRetryExhausted: No free name for a file; same partial records
        """
        files = self.collect_files()
        records: List[RenameRecord] = []

        if not files:
            logger.info("No files found in %s", self.directory)
            return records

        total = len(files)
        dry_run = self.options.dry_run
        logger.info("Found %d file(s) to randomize", total)
        if dry_run:
            logger.info("Running in dry-run mode - no files will be renamed")

        claims = NameClaims()

        for i, src in enumerate(files):
            try:
                dst = pick_new_path(
                    src,
                    claims,
                    preserve_extensions=self.options.preserve_extensions,
                    length=self.options.length,
                    token_factory=self.token_factory,
                    max_attempts=self.max_attempts,
                )
                if not dry_run:
                    execute_rename(src, dst)
            except (RenameFailed, CollisionRetryExhausted) as e:
                e.records = list(records)
                raise

            if dry_run:
                message = f"Would rename: {src} -> {dst}"
            else:
                message = f"Renamed: {src.name} -> {dst.name}"

            logger.info(message)
            records.append(RenameRecord(old_path=src, new_path=dst))

            if progress_callback:
                progress_callback(i + 1, total, message)

        return records


def randomize_directory(
    directory: Union[str, Path],
    options: Optional[Union[RandomizeOptions, Mapping[str, Any]]] = None,
    **overrides: Any
) -> List[RenameRecord]:
    """Shortcut for Renamer(directory, options, **overrides).randomize()"""
    return Renamer(directory, options, **overrides).randomize()
