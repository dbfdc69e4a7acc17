"""sanabot CLI — command line interface."""

import click
from sanabot import __version__
from .shared import console


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="sanabot")
@click.pass_context
def cli(ctx):
    """sanabot — Finnish Wiktionary lookups for Telegram"""
    if ctx.invoked_subcommand is None:
        _show_help()


def _show_help():
    """Show all available commands."""
    console.print(f"[bold]sanabot v{__version__}[/bold] — Finnish Wiktionary lookups for Telegram\n")
    for name, desc in (
        ("start", "Start the Telegram bot"),
        ("lookup WORD", "Print the entry for WORD in the terminal"),
    ):
        console.print(f"    [bold]sanabot {name:16s}[/bold] {desc}")
    console.print()
    console.print("[dim]Run 'sanabot <command> --help' for details on a specific command.[/dim]")


# Import all command modules (registers commands onto cli group)
from . import cmd_start  # noqa: E402, F401
from . import cmd_lookup  # noqa: E402, F401
