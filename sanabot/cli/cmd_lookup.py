"""Lookup command — run one query without Telegram."""

import asyncio
import click
import httpx
from rich.markup import escape

from . import cli
from .shared import console


@cli.command()
@click.argument("word", nargs=-1, required=True)
@click.option("--refs", is_flag=True, help="Also list the referenced words")
def lookup(word, refs):
    """Print the Wiktionary summary for WORD."""
    from sanabot.article import not_found_message
    from sanabot.config import load_settings
    from sanabot.errors import classify_error
    from sanabot.wiktionary import LookupState, WiktionaryClient

    query = " ".join(word).lower()
    settings = load_settings()

    async def _lookup():
        async with WiktionaryClient(settings) as wiki:
            return await wiki.lookup(query)

    try:
        result = asyncio.run(_lookup())
    except httpx.HTTPError as e:
        console.print(f"[red]{escape(classify_error(e))}[/red]")
        raise SystemExit(1)

    if result.state is LookupState.MISSING:
        console.print(escape(not_found_message(query)))
        raise SystemExit(1)

    article = result.article
    console.print(escape(article.message), highlight=False)
    if refs and article.refs:
        console.print("[bold]References[/bold]")
        for title in article.refs:
            console.print(f"  • {escape(title)}", highlight=False)
