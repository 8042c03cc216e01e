"""
models_fs.py - Core Data Structure Definitions

Contains:
- RandomizeOptions: Randomizer options configuration
- RenameRecord: Single completed (or previewed) rename
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional


# Keys accepted in an options mapping besides the field names themselves
_OPTION_ALIASES = {
    "name_length": "length",
}


@dataclass(frozen=True)
class RandomizeOptions:
    """Randomizer options configuration"""
    recursive: bool = False             # Descend into subdirectories
    dry_run: bool = False               # Preview only, do not actually rename
    preserve_extensions: bool = True    # Keep the original suffix (e.g., .png)
    length: int = 8                     # Random bytes; the hex name is twice as long
    include_hidden: bool = False        # Include dot-files and dot-directories

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"Name length must be an integer, got {self.length!r}")
        if self.length < 1:
            raise ValueError(f"Name length must be at least 1, got {self.length}")

    @property
    def name_length(self) -> int:
        """Alias of length"""
        return self.length

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a generated base name"""
        return self.length * 2

    @classmethod
    def from_mapping(
        cls,
        values: Optional[Mapping[str, Any]] = None,
        **overrides: Any
    ) -> "RandomizeOptions":
        """
        Build options from a mapping plus keyword overrides

        Args:
            values: Mapping with any of the option keys (unspecified keys use defaults)
            overrides: Keyword values taking precedence over the mapping

        Returns:
            Options instance

        Raises:
            TypeError: On an unknown option key
        """
        known = {f.name for f in fields(cls)}
        merged = {}
        for source in (values or {}, overrides):
            for key, value in source.items():
                key = _OPTION_ALIASES.get(key, key)
                if key not in known:
                    raise TypeError(f"Unknown option: {key}")
                merged[key] = value
        return cls(**merged)


@dataclass(frozen=True)
class RenameRecord:
    """Single rename mapping, in discovery order"""
    old_path: Path                      # Original path
    new_path: Path                      # Randomized path

    @property
    def old(self) -> Path:
        return self.old_path

    @property
    def new(self) -> Path:
        return self.new_path

    def relative_to(self, base: Path) -> str:
        """Get old path relative to base as a string"""
        try:
            return str(self.old_path.relative_to(base))
        except ValueError:
            return str(self.old_path)
