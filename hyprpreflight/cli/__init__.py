"""
CLI argument builders for hyprpreflight.

Each command's arguments are added by a builder function so the parser in
hyprpreflight.cli_parser stays a thin assembly of subcommands.
"""

from hyprpreflight.cli.common_args import (
    HELP_MESSAGES,
    PROGRAM_DESCRIPTIONS,
    add_universal_arguments,
    add_check_arguments,
)

__all__ = [
    'HELP_MESSAGES',
    'PROGRAM_DESCRIPTIONS',
    'add_universal_arguments',
    'add_check_arguments',
]
