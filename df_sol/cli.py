#!/usr/bin/env python3
"""df-sol CLI - Anchor workspace scaffolding for Solana programs."""

import typer
from rich.console import Console

from df_sol.cli_init_commands import register_init_commands
from df_sol.cli_utility_commands import register_utility_commands
from df_sol.core.logger import get_logger

app = typer.Typer(
    name="df-sol",
    help="""df-sol - Anchor workspace scaffolding for Solana programs

Picks a program template, a source layout and a test template,
then writes a ready-to-build Anchor workspace.

Quick start:
  df-sol templates              # See what is bundled
  df-sol init my-program        # basic program, mocha tests
  df-sol init demo -t counter   # counter program, mocha tests
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

# Attach modular subcommands
register_init_commands(app, console)
register_utility_commands(app, console)

if __name__ == "__main__":
    app()
