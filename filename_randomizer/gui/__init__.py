"""
gui - PySide6 Interface for Filename Randomizer
"""

from .gui_entry import main

__all__ = ["main"]
