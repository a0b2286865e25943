"""
Common CLI arguments and help messages.

This module contains:
- Help message definitions
- Universal argument functions
- Preflight check arguments
"""

from hyprpreflight.config import DEFAULT_CHECK_PATH, MIN_DISK_SPACE_GB


# Help messages dictionary - shared across all argument builders
HELP_MESSAGES = {
    'sub_commands': "Select a subcommand.",
    'check': "Run all preflight checks and report whether installation can proceed.",
    'progress': "Show each check as it runs.",
    'json': "Print the results as JSON instead of a table.",
    'timeout': (
        "Overall deadline for the run in seconds. Checks still running when it "
        "passes stop waiting and are reported as incomplete."
    ),
    'path': f"Filesystem path whose free space is checked (default: {DEFAULT_CHECK_PATH}).",
    'min_disk_gb': f"Minimum free space in GB (default: {MIN_DISK_SPACE_GB}).",
    'config_file': "Path to YAML file with configuration overrides.",
}

PROGRAM_DESCRIPTIONS = {
    'check': (
        "Execute all system validation checks to verify installation readiness.\n\n"
        "The preflight check covers:\n"
        "  - Debian version compatibility (Sid or Trixie required)\n"
        "  - GPU detection\n"
        f"  - Available disk space (minimum {MIN_DISK_SPACE_GB} GB)\n"
        "  - Internet connectivity\n"
        "  - Source repository configuration\n\n"
        "Blocking issues must be resolved before installation, while warnings are recommended fixes.\n\n"
        "Examples:\n"
        "  hyprpreflight check\n"
        "  hyprpreflight check --progress\n"
        "  hyprpreflight check --json --timeout 30"
    ),
}


def add_universal_arguments(parser):
    """Add arguments common to all commands.

    Args:
        parser: Argparse parser to add arguments to.
    """
    standard_args = parser.add_argument_group("Standard Arguments")
    standard_args.add_argument(
        '--config-file', '-c',
        type=str,
        help=HELP_MESSAGES['config_file']
    )

    output_control = parser.add_argument_group("Output Control")
    output_control.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )
    output_control.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose mode"
    )
    output_control.add_argument(
        "--stream-log-level",
        type=str,
        default=None,
        help="Log level for console output (e.g. WARNING, INFO, DEBUG)"
    )


def add_check_arguments(parser):
    """Add arguments for the check command.

    Args:
        parser: Argparse parser to add arguments to.
    """
    check_args = parser.add_argument_group("Check Options")
    check_args.add_argument(
        '--progress',
        action="store_true",
        help=HELP_MESSAGES['progress']
    )
    check_args.add_argument(
        '--json',
        action="store_true",
        help=HELP_MESSAGES['json']
    )
    check_args.add_argument(
        '--timeout',
        type=float,
        default=None,
        help=HELP_MESSAGES['timeout']
    )
    check_args.add_argument(
        '--path',
        type=str,
        default=None,
        help=HELP_MESSAGES['path']
    )
    check_args.add_argument(
        '--min-disk-gb',
        type=float,
        default=None,
        help=HELP_MESSAGES['min_disk_gb']
    )

    add_universal_arguments(parser)
