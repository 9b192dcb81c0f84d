"""Rich renderables for the headline view."""

from typing import TYPE_CHECKING, List, Optional

import pendulum
from rich.align import Align
from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..ingestion import Article, Category, category_label
from .events import FetchStatus

if TYPE_CHECKING:
    from .shell import ViewShell

CARD_WIDTH = 44
DESCRIPTION_LIMIT = 160


def render_header() -> RenderableType:
    return Panel.fit("📰 Headlines - Top stories", style="bold blue")


def render_category_placeholder() -> RenderableType:
    return Panel(Text("░" * 24, style="dim"), width=32, border_style="dim")


def render_selector(selected: Optional[Category], dropdown_open: bool) -> RenderableType:
    """Render the selector button and, when open, the dropdown list."""
    arrow = "▴" if dropdown_open else "▾"
    button = Panel(
        Text.assemble((category_label(selected), "bold"), "  ", arrow),
        width=32,
        subtitle="[dim]c: categories[/dim]",
    )
    if not dropdown_open:
        return button

    menu = Table(show_header=False, box=None, padding=(0, 1), width=32)
    menu.add_column(justify="right", style="dim")
    menu.add_column()
    for number, category in enumerate(Category, start=1):
        style = "bold blue on grey11" if category == selected else ""
        menu.add_row(str(number), Text(category.value, style=style))
    return Group(button, Panel(menu, width=32, border_style="grey50"))


def format_published(published_at: Optional[str]) -> str:
    """Humanize an upstream timestamp, falling back to the raw string."""
    if not published_at:
        return ""
    try:
        parsed = pendulum.parse(published_at)
    except ValueError:
        return published_at
    if not isinstance(parsed, pendulum.DateTime):
        return published_at
    return parsed.diff_for_humans()


def render_article(article: Article) -> RenderableType:
    """Render one article card."""
    body = Text()
    body.append(article.title or "(untitled)", style="bold")
    if article.description:
        description = article.description
        if len(description) > DESCRIPTION_LIMIT:
            description = description[: DESCRIPTION_LIMIT - 1].rstrip() + "…"
        body.append("\n\n")
        body.append(description)
    if article.url:
        body.append("\n\n")
        body.append(article.url, style=Style(color="cyan", link=article.url))

    published = format_published(article.published_at)
    subtitle = article.source.name + (f" · {published}" if published else "")
    return Panel(
        body,
        title=f"[dim]#{article.id + 1}[/dim]",
        title_align="left",
        subtitle=Text(subtitle, style="magenta"),
        subtitle_align="left",
        width=CARD_WIDTH,
    )


def render_articles(articles: List[Article]) -> RenderableType:
    if not articles:
        return Panel("[yellow]No articles found.[/yellow]", style="yellow")
    return Columns([render_article(article) for article in articles], equal=True)


def render_error(message: Optional[str]) -> RenderableType:
    # Upstream messages may contain square brackets, so no markup here
    body = Text.assemble(
        ("❌ Couldn't load headlines\n", "red"),
        (message or "Unknown error", "dim"),
        "\n\nPick a category to try again.",
    )
    return Panel(body, style="red")


def render_loading() -> RenderableType:
    return Align.center(Spinner("dots", text="Loading news...", style="blue"))


def render_view(shell: "ViewShell") -> RenderableType:
    """Render the whole page for the current shell state."""
    parts = [render_header()]

    if shell.categories_loading:
        parts.append(render_category_placeholder())
    elif not shell.loading:
        parts.append(render_selector(shell.selected_category, shell.dropdown_open))

    if shell.loading:
        parts.append(render_loading())
    elif shell.status == FetchStatus.FAILURE:
        parts.append(render_error(shell.last_error))
    elif shell.status == FetchStatus.SUCCESS:
        parts.append(render_articles(shell.articles))

    return Group(*parts)
