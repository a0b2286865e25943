"""Progress display for preflight runs using Rich library.

This module drains a runner's progress channel on the calling thread while
the runner produces on its own thread. It automatically detects interactive
vs non-interactive terminals and adjusts behavior accordingly.

In interactive terminals, a Rich progress bar shows the running check and a
line is printed for each finished check.
In non-interactive terminals (CI, logs), status messages are logged instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from hyprpreflight.report import STATUS_STYLES, display_name
from hyprpreflight.validation.result import STATUS_GLYPHS

if TYPE_CHECKING:
    from logging import Logger

    from hyprpreflight.runner import ProgressChannel, ProgressUpdate


def is_interactive_terminal() -> bool:
    """Detect if running in an interactive terminal.

    Returns:
        True if output is to an interactive terminal, False otherwise.
    """
    console = Console()
    return console.is_terminal


def format_update(update: "ProgressUpdate") -> str:
    """Plain one-line rendering, e.g. '✓ Disk Space: 120.00 GB available'."""
    name = display_name(update.requirement_name)
    if update.in_progress:
        return f"… {name}: {update.message}"
    return f"{STATUS_GLYPHS[update.status]} {name}: {update.message}"


def consume_progress(
    channel: "ProgressChannel",
    total: Optional[int] = None,
    logger: Optional["Logger"] = None,
    console: Optional[Console] = None,
    transient: bool = True,
) -> List["ProgressUpdate"]:
    """Display every update from `channel` until it is closed.

    Args:
        channel: The runner's progress channel.
        total: Number of checks, for the progress bar. If None, shows an
            indeterminate spinner.
        logger: Logger for non-interactive mode status messages.
            If None in non-interactive mode, no output is produced.
        console: Console for interactive output; a new one when omitted.
        transient: If True, the progress bar is cleared when complete.

    Returns:
        All updates received, in order.

    Example:
        >>> runner.start(ctx)
        >>> updates = consume_progress(runner.progress(), total=5, logger=logger)
    """
    received: List["ProgressUpdate"] = []
    console = console or Console()

    if not console.is_terminal:
        for update in channel:
            received.append(update)
            if logger is not None:
                if update.in_progress:
                    logger.status(format_update(update))
                elif update.result is not None and update.result.is_blocking():
                    logger.error(format_update(update))
                elif update.result is not None and update.result.is_warning():
                    logger.warning(format_update(update))
                else:
                    logger.status(format_update(update))
        return received

    columns = [
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
    ]
    if total is not None:
        columns += [BarColumn(), TextColumn("{task.completed}/{task.total}")]
    columns.append(TimeElapsedColumn())

    progress = Progress(*columns, console=console, transient=transient)
    task_id: TaskID = TaskID(0)

    try:
        progress.start()
        task_id = progress.add_task("Running preflight checks", total=total)
        for update in channel:
            received.append(update)
            if update.in_progress:
                progress.update(task_id, description=escape(update.message))
                continue
            style = STATUS_STYLES[update.status]
            progress.console.print(
                f"[{style}]{STATUS_GLYPHS[update.status]}[/{style}] "
                f"{display_name(update.requirement_name)}: {escape(update.message)}",
                highlight=False,
            )
            progress.update(task_id, advance=1)
    finally:
        progress.stop()

    return received


__all__ = [
    "is_interactive_terminal",
    "format_update",
    "consume_progress",
]
