"""Workspace creation CLI command - init."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from df_sol.cli_support import (
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)
from df_sol.core.errors import DfSolError
from df_sol.models.options import Language, Layout, ProgramTemplate, TestFramework
from df_sol.scaffold.core import ScaffoldManager, ScaffoldRequest
from df_sol.scaffold.generator import find_conflicts

# Module-level console instance (will be set by register function)
console: Console = Console()


def init(
    name: str = typer.Argument(..., help="Workspace name"),
    template: str = typer.Option(
        ProgramTemplate.BASIC.value, "--template", "-t",
        help=f"Rust program template ({', '.join(ProgramTemplate.values())})",
    ),
    layout: str = typer.Option(
        Layout.SINGLE.value, "--layout", "-l",
        help=f"Program source layout ({', '.join(Layout.values())})",
    ),
    test_template: str = typer.Option(
        TestFramework.MOCHA.value, "--test-template",
        help=f"Test template ({', '.join(TestFramework.values())})",
    ),
    javascript: bool = typer.Option(
        False, "--javascript", "-j", help="Use JavaScript instead of TypeScript for tests and deploy"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory to create the workspace in (default: cwd)"
    ),
    force: bool = typer.Option(False, "--force", help="Initialize even if there are files"),
    program_id: Optional[str] = typer.Option(
        None, "--program-id", help="Program id for declare_id! (default: Anchor placeholder)"
    ),
    license_id: Optional[str] = typer.Option(
        None, "--license", help="License written to package.json (default: MIT)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the files without writing them"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Initialize a new Anchor workspace.

    Examples:
        df-sol init counter --template counter --test-template jest
        df-sol init my-program --layout multiple
        df-sol init mint --template mint-token --dry-run
        df-sol init legacy --javascript --test-template jest
    """
    setup_logging(log_file, verbose)

    try:
        manager = ScaffoldManager()
        request = manager.prepare(
            name,
            template=template,
            layout=layout,
            test_template=test_template,
            output_dir=output_dir,
            program_id=program_id,
            license_id=license_id,
            language=Language.JAVASCRIPT if javascript else Language.TYPESCRIPT,
        )
        if dry_run:
            _show_plan(request)
            return
        summary = manager.generate(request, overwrite=force)
    except DfSolError as e:
        handle_cli_error(e, console, verbose)
        return

    for path in summary.written:
        marker = "overwrote" if path in summary.overwritten else "created"
        console.print(f"  [green]{marker}[/green] {escape(summary.relative(path))}", soft_wrap=True)

    print_success(console, f"{request.name.project} initialized")
    console.print("\n[cyan]Next steps:[/cyan]")
    console.print(f"  cd {escape(request.name.project)}")
    if request.test_framework is not TestFramework.RUST:
        console.print("  yarn install")
    console.print("  anchor build")
    console.print("  anchor test")


def _show_plan(request: ScaffoldRequest) -> None:
    """Print the resolved plan as a table."""
    conflicts = set(find_conflicts(request.plan, request.root))

    table = Table(
        title=f"{request.name.project}: {request.kind} + {request.test_framework.value} "
              f"({request.language.value})"
    )
    table.add_column("Path", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Status")

    for entry in request.plan:
        target = request.root / entry.destination
        if target in conflicts:
            status = "[yellow]exists[/yellow]"
        elif entry.is_dir and target.is_dir():
            status = "[dim]present[/dim]"
        else:
            status = "[green]new[/green]"
        table.add_row(
            escape(entry.destination),
            entry.asset.entry_type.value,
            status,
        )

    console.print(table)
    print_info(console, f"Dry run: nothing written to {escape(str(request.root))}")
    if conflicts:
        print_warning(console, f"{len(conflicts)} path(s) already exist; use --force to overwrite")


def register_init_commands(app: typer.Typer, shared_console: Console):
    """Register workspace creation commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(init)
