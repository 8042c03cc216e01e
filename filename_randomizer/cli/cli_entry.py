"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode
- Interactive mode (no directory given)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..core import (
    Renamer, RandomizeOptions, RenameRecord, RandomizeError, RenameFailed,
    CollisionRetryExhausted,
    check_writable
)
from .cli_interactive import interactive_mode

# Rows shown before the listing is truncated
PREVIEW_LIMIT = 20


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="filename-randomizer",
        description="Rename every file in a directory to a random name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  filename-randomizer --cli

  # Preview changes without renaming
  filename-randomizer --cli ./photos --dry-run

  # Process subdirectories, skip confirmation
  filename-randomizer --cli ./photos --recursive --yes

  # Drop extensions, use longer names (16 bytes = 32 hex chars)
  filename-randomizer --cli ./photos --no-preserve-extensions --length 16
"""
    )

    parser.add_argument("directory", type=str, nargs="?", help="Target directory")
    parser.add_argument("--recursive", "-r", action="store_true", help="Process subdirectories")
    parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    parser.add_argument("--no-preserve-extensions", dest="preserve_extensions",
                        action="store_false", help="Do not keep file extensions")
    parser.add_argument("--length", "-l", type=int, default=8,
                        help="Random bytes per name (name is twice as many hex chars)")
    parser.add_argument("--include-hidden", action="store_true", help="Include hidden files")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    return parser


def print_records(
    records: Sequence[RenameRecord],
    base: Path,
    limit: int = PREVIEW_LIMIT
) -> None:
    """Print rename records as a table"""
    print("-" * 80)
    for record in records[:limit]:
        print(f"  {record.relative_to(base):<40} -> {record.new_path.name}")
    if len(records) > limit:
        print(f"  ... and {len(records) - limit} more operations")
    print("-" * 80)


def configure_logging(verbose: bool = False) -> None:
    """Set up console logging"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_randomize(args) -> int:
    """Handle randomize command"""
    try:
        options = RandomizeOptions(
            recursive=args.recursive,
            dry_run=args.dry_run,
            preserve_extensions=args.preserve_extensions,
            length=args.length,
            include_hidden=args.include_hidden,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    renamer = Renamer(args.directory, options)
    directory = renamer.directory

    print(f"Target directory: {directory}")
    print(f"Recursive: {options.recursive}")
    print(f"Preserve extensions: {options.preserve_extensions}")
    print(f"Name length: {options.hex_length} hex chars")
    print()

    try:
        if options.dry_run:
            records = renamer.randomize()
            if not records:
                print("No files found")
                return 0
            print(f"Would perform {len(records)} rename operations:")
            print_records(records, directory)
            print("\n[Preview mode] Will not actually execute")
            return 0

        preview = Renamer(directory, options, dry_run=True).randomize()
        if not preview:
            print("No files found")
            return 0

        print(f"Will perform {len(preview)} rename operations (names are drawn again on execution):")
        print_records(preview, directory)

        writable, reason = check_writable(directory)
        if not writable:
            print(f"Warning: {reason}")

        if not args.yes:
            confirm = input("\nConfirm execution? This cannot be undone (y/N): ").strip().lower()
            if confirm != 'y':
                print("Cancelled")
                return 0

        print("\nExecuting...")
        records = renamer.randomize()
    except (RenameFailed, CollisionRetryExhausted) as e:
        print(f"Error: {e}")
        if e.records:
            print(f"{len(e.records)} files were renamed before the failure:")
            print_records(e.records, directory)
        return 1
    except RandomizeError as e:
        print(f"Error: {e}")
        return 1

    print(f"Renamed {len(records)} files:")
    print_records(records, directory)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.directory is None:
        # No directory, enter interactive mode
        return interactive_mode()

    return cmd_randomize(args)


if __name__ == "__main__":
    sys.exit(main())
