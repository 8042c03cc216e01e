"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import sys
from pathlib import Path
from typing import List, Optional

from ..core import (
    Renamer, RandomizeOptions, RenameRecord, RandomizeError,
    RenameFailed, CollisionRetryExhausted
)

# Rows shown before the listing is truncated
LIST_LIMIT = 15


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def ask_directory() -> Optional[Path]:
    """Ask for the target directory; None when the user backs out"""
    while True:
        answer = input("Target directory (q to return): ").strip()
        if answer.lower() == 'q':
            return None

        directory = Path(answer).expanduser()
        if directory.is_dir():
            return directory
        print(f"Error: Not a directory: {directory}")


def ask_yes_no(question: str, default: bool) -> bool:
    """Ask a y/n question; empty answer keeps the default"""
    hint = "Y/n" if default else "y/N"
    answer = input(f"{question} ({hint}): ").strip().lower()
    return default if not answer else answer == 'y'


def ask_length(default: int = 8) -> int:
    """Ask for the random byte count (at least 1)"""
    while True:
        answer = input(f"Random bytes per name [{default}]: ").strip()
        if not answer:
            return default
        if answer.isdigit() and int(answer) >= 1:
            return int(answer)
        print("Please enter a whole number of at least 1")


def ask_options(dry_run: bool) -> RandomizeOptions:
    """Ask for randomizer options"""
    return RandomizeOptions(
        recursive=ask_yes_no("Process subdirectories", False),
        dry_run=dry_run,
        preserve_extensions=ask_yes_no("Preserve extensions", True),
        length=ask_length(),
        include_hidden=ask_yes_no("Include hidden files", False),
    )


def show_records(records: List[RenameRecord], base: Path, verb: str):
    """List records, truncated after LIST_LIMIT rows"""
    print(f"\n{verb} {len(records)} files:")
    print("-" * 70)
    for record in records[:LIST_LIMIT]:
        print(f"  {record.relative_to(base):<30} -> {record.new_path.name}")
    if len(records) > LIST_LIMIT:
        print(f"  ... and {len(records) - LIST_LIMIT} more operations")
    print("-" * 70)


def menu_randomize(dry_run: bool = False):
    """Randomize (or preview) menu"""
    print_header("Preview Randomization" if dry_run else "Randomize Filenames")

    directory = ask_directory()
    if directory is None:
        return

    options = ask_options(dry_run)
    renamer = Renamer(directory, options)

    try:
        if not dry_run:
            preview = Renamer(directory, options, dry_run=True).randomize()
            if not preview:
                print("No files found")
                return
            show_records(preview, renamer.directory, "Would rename")
            if not ask_yes_no("Confirm execution", False):
                print("Cancelled")
                return
            print("\nExecuting...")

        records = renamer.randomize()
    except (RenameFailed, CollisionRetryExhausted) as e:
        print(f"\nError: {e}")
        print(f"{len(e.records)} files were renamed before the failure")
        return
    except RandomizeError as e:
        print(f"\nError: {e}")
        return

    if not records:
        print("No files found")
        return

    show_records(records, renamer.directory, "Would rename" if dry_run else "Renamed")


def interactive_mode() -> int:
    """Interactive mode main loop"""
    menu = {
        '1': ("Preview randomization (dry run)", True),
        '2': ("Randomize filenames", False),
    }

    while True:
        print_header("Filename Randomizer")
        for key, (label, _) in menu.items():
            print(f"  {key}. {label}")
        print("  q. Exit")
        print()

        choice = input("Please select (1/2/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        if choice in menu:
            menu_randomize(dry_run=menu[choice][1])
        else:
            print("Invalid choice")


if __name__ == "__main__":
    sys.exit(interactive_mode())
