"""Start command."""

import asyncio
import click

from . import cli
from .shared import console


@cli.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def start(debug):
    """Start the Telegram bot."""
    from sanabot.config import load_settings
    from sanabot.main import run, setup_logging

    settings = load_settings()
    setup_logging(settings, debug=debug)
    console.print("[bold blue]Starting sanabot...[/bold blue]")
    asyncio.run(run(settings))
