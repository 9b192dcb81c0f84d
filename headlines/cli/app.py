"""Main CLI application."""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from ..config import Config
from ..utils.logging import configure_logging
from .browse import browse_command
from .categories import categories_command
from .fetch import fetch_command
from .init import init_command

app = typer.Typer(
    name="headlines",
    help="Headlines - browse top news by category from the terminal",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar="HEADLINES_CONFIG",
        help="Path to config.yaml (default: ~/.config/headlines/config.yaml)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Headlines - browse top news by category from the terminal."""
    configure_logging(log_level)
    ctx.obj = Config(config_path)


# Register commands
app.command("init")(init_command)
app.command("categories")(categories_command)
app.command("fetch")(fetch_command)
app.command("browse")(browse_command)


if __name__ == "__main__":
    app()
