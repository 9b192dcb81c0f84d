"""Fetch command implementation."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..ingestion import Category, GNewsClient, articles_to_json
from ..view.render import render_articles

console = Console()


def fetch_command(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help="Category name (see 'headlines categories'). Default: top stories",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print normalized articles as JSON",
    ),
) -> None:
    """Fetch headlines once and print them."""
    config: Config = ctx.obj or Config()

    selected = None
    if category is not None:
        try:
            selected = Category.coerce(category)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(2)

    try:
        client = GNewsClient(config)
        with console.status("[blue]Loading news...[/blue]"):
            result = client.fetch_sync(selected)
    except ValueError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not result.success:
        console.print(f"[red]❌ Failed to fetch headlines: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(articles_to_json(result.articles), indent=2))
        return

    console.print(render_articles(result.articles))
    console.print(f"[dim]{result.article_count} articles[/dim]")
