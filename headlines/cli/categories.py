"""Categories command implementation."""

from rich.console import Console
from rich.table import Table

from ..ingestion import Category

console = Console()


def categories_command() -> None:
    """List the available headline categories."""
    table = Table(title="Categories")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Query value", style="magenta")

    for number, category in enumerate(Category, start=1):
        table.add_row(str(number), category.value, category.query_value)

    console.print(table)
