"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_DIR, ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    country: str = typer.Option("in", "--country", help="Two-letter country filter"),
    api_key_env: str = typer.Option(
        "GNEWS_API_KEY", "--api-key-env", help="Environment variable holding the API key"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Initialize Headlines configuration."""
    console.print(Panel.fit("📰 Headlines - Initialization", style="bold blue"))

    config_path = config_dir / "config.yaml"
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        config = ConfigModel(
            gnews={
                "country": country,
                "api_key_env": api_key_env,
            },
        )
    except ValueError as e:
        console.print(f"[red]❌ Invalid option: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # Save configuration
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print(
        Panel(
            f"[green]✅ Headlines initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set API key: [bold]export {api_key_env}=your_key[/bold]\n"
            f"2. Run: [bold]headlines browse[/bold]",
            style="green",
        )
    )
