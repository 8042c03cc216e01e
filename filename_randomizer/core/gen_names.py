"""
gen_names.py - Random Name Generation

Provides extension extraction and random hex name generation
"""

from typing import Callable
import os
import secrets

# Produces a hex string from a byte count
TokenFactory = Callable[[int], str]


def extract_extension(name: str) -> str:
    """
    Get the extension of a base name

    Args:
        name: Filename (a path is reduced to its base name)

    Returns:
        Suffix from the last dot, including the dot, or "" if none
    """
    return os.path.splitext(os.path.basename(name))[1]


def random_hex(length: int, token_factory: TokenFactory = secrets.token_hex) -> str:
    """
    Generate a random hex string of 2 * length characters

    Args:
        length: Number of random bytes
        token_factory: Randomness source

    Returns:
        Hex string
    """
    return token_factory(length)


def generate_random_name(
    original_name: str,
    preserve_extensions: bool = True,
    length: int = 8,
    token_factory: TokenFactory = secrets.token_hex
) -> str:
    """
    Generate a random replacement for a filename

    Args:
        original_name: Current base name
        preserve_extensions: Whether to keep the original extension
        length: Number of random bytes
        token_factory: Randomness source

    Returns:
        New base name
    """
    random_base = random_hex(length, token_factory)

    if not preserve_extensions:
        return random_base

    extension = extract_extension(original_name)
    return f"{random_base}{extension}" if extension else random_base
