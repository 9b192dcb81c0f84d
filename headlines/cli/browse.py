"""Browse command implementation."""

import asyncio
from typing import Awaitable, Callable, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.prompt import Prompt

from ..config import Config
from ..ingestion import Category, GNewsClient
from ..view import Interaction, Region, ViewShell

console = Console()

QUIT_COMMANDS = {"q", "quit", "exit"}
HELP_TEXT = (
    "[dim]c[/dim] toggle categories  "
    "[dim]1-7 / name[/dim] pick (while open)  "
    "[dim]r[/dim] redraw  "
    "[dim]q[/dim] quit"
)


def _match_category(command: str) -> Optional[Category]:
    """Resolve a menu number or a category name."""
    members = list(Category)
    if command.isdigit():
        index = int(command) - 1
        if 0 <= index < len(members):
            return members[index]
        return None
    try:
        return Category.coerce(command)
    except ValueError:
        return None


def handle_command(shell: ViewShell, command: str, out: Console = console) -> bool:
    """Apply one line of user input. Returns False when the session should end."""
    command = command.strip()
    lowered = command.lower()

    if lowered in QUIT_COMMANDS:
        return False

    if lowered in ("", "r"):
        return True

    if lowered == "c":
        if not shell.selector_visible:
            out.print("[yellow]Categories are not available yet.[/yellow]")
            return True
        shell.interact(Interaction(Region.SELECTOR))
        shell.toggle_dropdown()
        return True

    if shell.dropdown_open:
        category = _match_category(lowered)
        if category is not None:
            shell.interact(Interaction(Region.DROPDOWN))
            shell.select_category(category)
            return True

    # Anything else lands outside the dropdown
    shell.interact(Interaction(Region.OUTSIDE))
    if lowered not in ("h", "help", "?"):
        out.print(f"[yellow]Unknown command: {escape(command)}[/yellow]")
    out.print(HELP_TEXT)
    return True


async def _settle(shell: ViewShell, out: Console) -> None:
    """Show live updates until loading and the category delay are over."""
    with Live(shell.render(), console=out, refresh_per_second=12) as live:
        shell.on_change = lambda: live.update(shell.render())
        try:
            await shell.wait_idle()
            await shell.wait_categories()
        finally:
            shell.on_change = None


async def run_session(
    shell: ViewShell,
    read_command: Callable[[], Awaitable[str]],
    out: Console = console,
) -> None:
    """Drive the shell until the user quits."""
    shell.mount()
    try:
        while True:
            if shell.loading or shell.categories_loading:
                await _settle(shell, out)
            else:
                out.print(shell.render())

            command = await read_command()
            if not handle_command(shell, command, out):
                break
    finally:
        await shell.aclose()


def browse_command(ctx: typer.Context) -> None:
    """Browse headlines interactively."""
    config: Config = ctx.obj or Config()

    try:
        delay = config.config.ui.category_delay
    except ValueError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    async def read_command() -> str:
        return await asyncio.to_thread(Prompt.ask, "[bold]>[/bold]", console=console, default="")

    shell = ViewShell(GNewsClient(config), category_delay=delay)
    console.print(HELP_TEXT)
    try:
        asyncio.run(run_session(shell, read_command))
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Bye[/yellow]")
