"""
plan_rename.py - Collision-Safe Target Selection

Responsibilities:
- Draw random names until one is free on disk
- Remember names already handed out in the current run
"""

from pathlib import Path
from typing import Set
import logging
import os
import secrets

from .errors import CollisionRetryExhausted
from .gen_names import TokenFactory, generate_random_name

logger = logging.getLogger(__name__)

# Draw cap per file; hitting it means the randomness source is broken
MAX_ATTEMPTS = 1000


class NameClaims:
    """Target paths claimed during one run"""

    def __init__(self):
        self.claimed: Set[Path] = set()

    def is_taken(self, path: Path) -> bool:
        """Check if path exists on disk (dangling symlinks included) or is already claimed"""
        return path in self.claimed or os.path.lexists(path)

    def claim(self, path: Path) -> None:
        """Mark path as handed out"""
        self.claimed.add(path)


def pick_new_path(
    src: Path,
    claims: NameClaims,
    preserve_extensions: bool = True,
    length: int = 8,
    token_factory: TokenFactory = secrets.token_hex,
    max_attempts: int = MAX_ATTEMPTS
) -> Path:
    """
    Choose a free random path next to src

    Args:
        src: File being renamed
        claims: Paths already handed out in this run
        preserve_extensions: Whether to keep the original extension
        length: Number of random bytes
        token_factory: Randomness source
        max_attempts: Draw cap

    Returns:
        New path in the same directory as src

    Raises:
        CollisionRetryExhausted: No free name within max_attempts draws
    """
    directory = src.parent

    for attempt in range(1, max_attempts + 1):
        new_name = generate_random_name(
            src.name,
            preserve_extensions=preserve_extensions,
            length=length,
            token_factory=token_factory,
        )
        candidate = directory / new_name
        if not claims.is_taken(candidate):
            claims.claim(candidate)
            return candidate
        logger.debug("Collision on %s (attempt %d), drawing again", candidate, attempt)

    raise CollisionRetryExhausted(src, max_attempts)
