#!/usr/bin/env python3
"""
run.py - Main entry point for the 4x4 Connect Four game
"""

import argparse
import sys
from typing import List, Optional

from connect4x4.config import default_debug_level
from connect4x4.debug import debug, DebugLevel


def configure_debug(args) -> None:
    """Configure logging from --debug-level and --log-file."""
    level = DebugLevel.from_string(args.debug_level)
    debug.configure(level=level, console=level != DebugLevel.NONE,
                    log_file=args.log_file or "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Two-player Connect Four on a 4x4 board')
    parser.add_argument('mode', nargs='?', choices=['gui', 'cli'], default='gui',
                        help='Interface to start (default: gui)')
    parser.add_argument('--debug-level', default=default_debug_level(),
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging verbosity (default from CONNECT4X4_DEBUG_LEVEL)')
    parser.add_argument('--log-file', help='Also write log messages to this file')
    parser.add_argument('--once', action='store_true',
                        help='CLI only: exit after one game')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_debug(args)
    except ValueError as e:
        parser.error(str(e))

    if args.mode == 'cli':
        from connect4x4.interfaces.cli import SimpleCLI
        cli = SimpleCLI()
        cli.parse_args(['--once'] if args.once else [])
        cli.run()
    else:
        # Imported lazily so the CLI works without a display
        from connect4x4.interfaces.gui import ConnectFourGUI
        ConnectFourGUI().run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
