#!/usr/bin/env python3
"""
hyprpreflight - Main Entry Point

This module provides the main entry point for the preflight checks, with
comprehensive error handling and user-friendly messaging. The runner works
on a background thread while the main thread drains its progress channel.
"""

import signal
import sys
import traceback

from rich.console import Console

from hyprpreflight.cli_parser import parse_arguments
from hyprpreflight.config import EXIT_CODE, load_config
from hyprpreflight.context import ValidationContext
from hyprpreflight.errors import ConfigurationError, PreflightException
from hyprpreflight.preflight_logging import LOGGER_NAME, apply_logging_options, setup_logging
from hyprpreflight.progress import consume_progress, is_interactive_terminal
from hyprpreflight.report import PreflightReport
from hyprpreflight.runner import ValidationRunner
from hyprpreflight.validation.events import EventPublisher, LoggingEventObserver

logger = setup_logging(LOGGER_NAME)
debug_enabled = False
active_context = None


def signal_handler(sig, frame):
    """Handle signals like SIGINT (Ctrl+C) and SIGTERM."""
    signal_name = signal.Signals(sig).name
    logger.warning(f"Received signal {signal_name} ({sig})")
    if active_context is not None:
        active_context.cancel()
    logger.info("Exiting due to signal")
    sys.exit(EXIT_CODE.INTERRUPTED)


def run_check(args) -> EXIT_CODE:
    """
    Run the preflight checks described by args and print the report.

    Args:
        args: Parsed command line arguments.

    Returns:
        EXIT_CODE.SUCCESS when installation can proceed (with or without
        warnings), EXIT_CODE.BLOCKED otherwise.

    Raises:
        ConfigurationError: If the configuration file or overrides are invalid.
    """
    global active_context

    config = load_config(
        args.config_file,
        check_path=args.path,
        min_disk_space_gb=args.min_disk_gb,
        timeout=args.timeout,
    )
    logger.debug(f"Effective configuration: {config}")

    ctx = ValidationContext.with_timeout(config.timeout) if config.timeout else ValidationContext.background()

    publisher = EventPublisher(logger=logger)
    if args.verbose or args.debug:
        LoggingEventObserver(logger=logger).attach(publisher)

    runner = ValidationRunner.default(config, publisher=publisher, logger=logger)
    if args.progress:
        logger.status("Running preflight checks...")

    active_context = ctx
    try:
        thread = runner.start(ctx)
        if args.progress:
            consume_progress(runner.progress(), total=len(runner.validators), logger=logger)
        else:
            for _ in runner.progress():
                pass
        thread.join()
    finally:
        active_context = None

    report = PreflightReport.from_session(runner.session())
    if args.json:
        print(report.to_json())
    elif is_interactive_terminal():
        report.render(Console())
    else:
        sys.stdout.write(report.render_text(failures_only=args.progress))

    if report.can_proceed:
        logger.result(report.message)
    else:
        logger.error(report.message)
    return report.exit_code


def _main_impl(argv=None):
    """
    Main implementation with error handling.

    This is the actual implementation of main(), separated out
    so that main() can wrap it with exception handling.
    """
    global debug_enabled

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    args = parse_arguments(argv)
    debug_enabled = args.debug
    apply_logging_options(logger, args)

    if args.program == "check":
        return run_check(args)

    raise ConfigurationError(
        f"Unsupported command: {args.program}",
        parameter="program",
        expected=["check"],
        actual=args.program,
    )


def main(argv=None):
    """
    Main entry point with comprehensive error handling.

    This function wraps _main_impl() to catch and handle all
    exceptions with user-friendly error messages.
    """
    try:
        return _main_impl(argv)

    except ConfigurationError as e:
        logger.error(str(e))
        if e.suggestion:
            logger.info(f"Suggestion: {e.suggestion}")
        return EXIT_CODE.CONFIG_ERROR

    except PreflightException as e:
        logger.error(str(e))
        if e.suggestion:
            logger.info(f"Suggestion: {e.suggestion}")
        return EXIT_CODE.ERROR

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_CODE.INTERRUPTED

    except SystemExit:
        # Re-raise SystemExit to allow clean exits
        raise

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        if debug_enabled:
            logger.debug("Stack trace:")
            traceback.print_exc()
        else:
            logger.info("Run with --debug for full stack trace")

        return EXIT_CODE.ERROR


if __name__ == "__main__":
    sys.exit(main())
