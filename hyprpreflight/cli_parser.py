"""
CLI argument parsing for hyprpreflight.

This module provides the main argument parsing entry point,
using modular argument builders from the cli package.
"""

import argparse
import sys

from hyprpreflight import VERSION
from hyprpreflight.cli import (
    HELP_MESSAGES,
    PROGRAM_DESCRIPTIONS,
    add_check_arguments,
)
from hyprpreflight.config import EXIT_CODE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyprpreflight",
        description="Pre-installation environment checks for Hyprland on Debian",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    sub_programs = parser.add_subparsers(dest="program", help=HELP_MESSAGES['sub_commands'])
    sub_programs.required = True

    check_parser = sub_programs.add_parser(
        "check",
        description=PROGRAM_DESCRIPTIONS['check'],
        help=HELP_MESSAGES['check'],
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_check_arguments(check_parser)
    return parser


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Args:
        argv: Argument list without the program name; sys.argv[1:] when None.

    Returns:
        argparse.Namespace: Parsed and validated arguments.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    if not argv:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_CODE.CONFIG_ERROR)

    parsed_args = parser.parse_args(argv)
    validate_args(parsed_args)
    return parsed_args


def validate_args(args):
    error_messages = []
    if getattr(args, "timeout", None) is not None and args.timeout <= 0:
        error_messages.append("--timeout must be a positive number of seconds")
    if getattr(args, "min_disk_gb", None) is not None and args.min_disk_gb < 0:
        error_messages.append("--min-disk-gb cannot be negative")

    if error_messages:
        for msg in error_messages:
            print(msg, file=sys.stderr)

        sys.exit(EXIT_CODE.CONFIG_ERROR)
