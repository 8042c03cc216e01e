#!/usr/bin/env python3
"""
Filename Randomizer - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    filename-randomizer                           # GUI mode (default)
    filename-randomizer --cli                     # CLI interactive mode
    filename-randomizer -c ./dir --dry-run        # CLI command mode
    filename-randomizer -c ./dir -r -y            # CLI command mode
"""

import sys


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv or "-c" in sys.argv:
        argv = [arg for arg in sys.argv[1:] if arg not in ("--cli", "-c")]

        from .cli import main as cli_main
        return cli_main(argv)

    # Default to starting GUI
    try:
        from .gui import main as gui_main
    except ImportError as e:
        print("Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    filename-randomizer --cli")
        print("or  filename-randomizer -c")
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())
