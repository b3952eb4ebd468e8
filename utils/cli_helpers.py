#!/usr/bin/env python3
"""
CLI helper utilities for consistent error display and progress reporting.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from services.hashing_errors import (
    ConfigError,
    FileAccessError,
    HashingError,
    ReadError,
    UnsupportedAlgorithmError,
)

console = Console()
error_console = Console(stderr=True)


def display_error(message: str, suggestion: Optional[str] = None) -> None:
    """
    Display an error message with an optional suggestion.

    Args:
        message: The error message to display
        suggestion: Optional hint printed underneath
    """
    error_console.print(f"Error: {message}", style="red", markup=False, highlight=False, soft_wrap=True)
    if suggestion:
        error_console.print(f"💡 {suggestion}", style="yellow", markup=False, highlight=False, soft_wrap=True)


def display_hashing_error(error: HashingError) -> None:
    """Display a hashing error with a suggestion specific to its kind."""
    if isinstance(error, UnsupportedAlgorithmError):
        display_error(str(error), f"Choose one of: {', '.join(error.supported)}")
    elif isinstance(error, FileAccessError):
        suggestions = {
            FileAccessError.NOT_FOUND: "Check the path and try again",
            FileAccessError.PERMISSION_DENIED: "Check the file permissions",
            FileAccessError.IS_DIRECTORY: "Pass a single file, not a directory",
        }
        display_error(str(error), suggestions.get(error.reason))
    elif isinstance(error, ReadError):
        display_error(f"Error calculating hash: {error}")
    elif isinstance(error, ConfigError):
        display_error(f"Configuration error: {error}", "Chunk size must be a positive whole number of MB")
    else:
        display_error(str(error))


@contextmanager
def progress_observer(description: str = "Progress", target: Optional[Console] = None) -> Iterator[Callable[[float], None]]:
    """
    Yield a progress callback that drives a rich progress bar updated in place.

    The callback takes the completed fraction in [0.0, 1.0].

    Example:
        with progress_observer() as observer:
            service.compute(path, kind, observer)
    """
    progress = Progress(
        TextColumn("[bold]{task.description}:"),
        BarColumn(bar_width=50),
        TaskProgressColumn(),
        console=target or console,
        transient=False,
    )
    with progress:
        task_id = progress.add_task(description, total=1.0)

        def observer(fraction: float) -> None:
            progress.update(task_id, completed=min(max(fraction, 0.0), 1.0))

        yield observer
