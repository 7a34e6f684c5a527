"""Utility CLI commands - templates, version."""
import typer
from rich.console import Console
from rich.table import Table

from df_sol import __version__
from df_sol.cli_support import handle_cli_error
from df_sol.core.errors import DfSolError
from df_sol.models.options import Language, Layout, ProgramTemplate, TemplateKind, TestFramework
from df_sol.scaffold.catalog import get_catalog

# Module-level console instance (will be set by register function)
console: Console = Console()


def templates():
    """List the bundled program templates and the test frameworks each supports.

    Examples:
        df-sol templates
    """
    try:
        catalog = get_catalog()
    except DfSolError as e:
        handle_cli_error(e, console)
        return

    table = Table(title="Program templates")
    table.add_column("Template", style="cyan")
    table.add_column("Description")
    table.add_column("Layout", style="magenta")
    table.add_column("Test templates", style="green")
    table.add_column("With --javascript", style="green")

    for program in ProgramTemplate:
        first = True
        for layout in Layout:
            kind = TemplateKind(program, layout)
            supported = catalog.supported_test_frameworks(kind)
            supported_js = catalog.supported_test_frameworks(kind, Language.JAVASCRIPT)
            table.add_row(
                program.value if first else "",
                catalog.describe_program(program) if first else "",
                layout.value,
                ", ".join(tf.value for tf in supported) if supported else "[dim]-[/dim]",
                ", ".join(tf.value for tf in supported_js) if supported_js else "[dim]-[/dim]",
            )
            first = False

    console.print(table)

    layouts = Table(title="Layouts")
    layouts.add_column("Name", style="magenta")
    layouts.add_column("Description")
    for layout in Layout:
        layouts.add_row(layout.value, catalog.describe_layout(layout))
    console.print(layouts)

    languages = Table(title="Languages")
    languages.add_column("Name", style="magenta")
    languages.add_column("Description")
    for language in Language:
        languages.add_row(language.value, catalog.describe_language(language))
    console.print(languages)

    frameworks = Table(title="Test templates")
    frameworks.add_column("Name", style="cyan")
    frameworks.add_column("Description")
    frameworks.add_column("Test script", style="dim")
    frameworks.add_column("JavaScript test script", style="dim")
    for test_framework in TestFramework:
        has_js = any(
            tf is test_framework
            for _, tf in catalog.valid_combinations(Language.JAVASCRIPT)
        )
        frameworks.add_row(
            test_framework.value,
            catalog.describe_test_framework(test_framework),
            catalog.test_script(test_framework),
            catalog.test_script(test_framework, Language.JAVASCRIPT) if has_js else "[dim]-[/dim]",
        )
    console.print(frameworks)


def version():
    """Show df-sol version."""
    console.print(f"df-sol v{__version__} - Anchor workspace scaffolding")


def register_utility_commands(app: typer.Typer, shared_console: Console):
    """Register utility commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(templates)
    app.command()(version)
