"""Shared utilities for df-sol CLI modules."""
from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from df_sol.core.config import get_config
from df_sol.core.errors import DfSolError


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up console verbosity and, when requested, file logging.

    Args:
        log_file: Path to log file (falls back to DF_SOL_LOG_FILE)
        verbose: Enable verbose logging
    """
    from df_sol.core.logger import set_verbose, setup_file_logging

    if verbose:
        set_verbose(True)
    target = log_file or get_config().log_file
    if target:
        setup_file_logging(log_file=target, verbose=verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: Optional[int] = None,
) -> None:
    """Handle CLI errors with consistent formatting.

    Prints a single line naming the failing stage and exits with the code
    the error class declares.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Override for the exit code
    """
    if isinstance(e, DfSolError):
        label = f"Error ({e.stage})"
        code = e.exit_code
    else:
        label = "Error"
        code = 1
    if exit_code is not None:
        code = exit_code

    console.print(f"[red]{label}:[/red] {escape(str(e))}", soft_wrap=True)
    if verbose:
        console.print_exception()
    raise typer.Exit(code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting.

    Args:
        console: Rich console for output
        message: Success message
        prefix: Prefix symbol (default: ✓)
    """
    console.print(f"[green]{prefix}[/green] {message}", soft_wrap=True)


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting.

    Args:
        console: Rich console for output
        message: Warning message
        prefix: Prefix symbol (default: ⚠)
    """
    console.print(f"[yellow]{prefix}[/yellow] {message}", soft_wrap=True)


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting.

    Args:
        console: Rich console for output
        message: Info message
        prefix: Prefix symbol (default: ℹ)
    """
    console.print(f"[cyan]{prefix}[/cyan] {message}", soft_wrap=True)
