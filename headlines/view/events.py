"""Interaction events, fetch status and the page-wide listener registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List


class FetchStatus(str, Enum):
    """Lifecycle of the current fetch cycle."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class Region(str, Enum):
    """Where an interaction landed."""

    SELECTOR = "selector"
    DROPDOWN = "dropdown"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Interaction:
    """A single user interaction."""

    region: Region = Region.OUTSIDE

    @property
    def inside_dropdown(self) -> bool:
        return self.region in (Region.SELECTOR, Region.DROPDOWN)


Listener = Callable[[Interaction], None]


class InteractionBus:
    """Page-level interaction listeners.

    Plays the part of a document-wide event target: anything registered here
    sees every dispatched interaction until it is removed.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def has_listener(self, listener: Listener) -> bool:
        return listener in self._listeners

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, interaction: Interaction) -> None:
        """Deliver an interaction to every registered listener."""
        # Listeners may detach themselves while being called
        for listener in list(self._listeners):
            listener(interaction)
