"""Terminal view for browsing headlines."""

from .events import FetchStatus, Interaction, InteractionBus, Region
from .render import render_view
from .shell import ViewShell

__all__ = [
    "ViewShell",
    "FetchStatus",
    "Interaction",
    "InteractionBus",
    "Region",
    "render_view",
]
