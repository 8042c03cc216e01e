"""
core - Filename Randomizer Core Module

Provides file collection, random name generation, collision avoidance and rename execution.
"""

from .models_fs import (
    RandomizeOptions,
    RenameRecord,
)

from .errors import (
    RandomizeError,
    DirectoryNotFound,
    NotADirectory,
    ScanFailed,
    RenameFailed,
    CollisionRetryExhausted,
)

from .scan_files import (
    collect_files,
    scan_directory,
    scan_recursive,
    is_candidate,
)

from .gen_names import (
    extract_extension,
    generate_random_name,
)

from .plan_rename import (
    NameClaims,
    pick_new_path,
    MAX_ATTEMPTS,
)

from .exec_rename import (
    execute_rename,
)

from .safety_checks import (
    validate_directory,
    check_writable,
)

from .randomizer import (
    Renamer,
    randomize_directory,
)

__all__ = [
    # Data models
    "RandomizeOptions",
    "RenameRecord",

    # Errors
    "RandomizeError",
    "DirectoryNotFound",
    "NotADirectory",
    "ScanFailed",
    "RenameFailed",
    "CollisionRetryExhausted",

    # Scanning
    "collect_files",
    "scan_directory",
    "scan_recursive",
    "is_candidate",

    # Name generation
    "extract_extension",
    "generate_random_name",

    # Planning
    "NameClaims",
    "pick_new_path",
    "MAX_ATTEMPTS",

    # Execution
    "execute_rename",

    # Safety checks
    "validate_directory",
    "check_writable",

    # Pipeline
    "Renamer",
    "randomize_directory",
]
