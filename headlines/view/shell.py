"""Interactive view state for the headline browser."""

import asyncio
from typing import Callable, List, Optional, Set, Union

from rich.console import RenderableType

from ..ingestion import Article, Category, FetchResult, GNewsClient
from ..utils.logging import get_logger
from .events import FetchStatus, Interaction, InteractionBus
from .render import render_view

logger = get_logger(__name__)


class ViewShell:
    """Owns the selector, dropdown and loading state and mediates all input.

    Must be driven from inside a running event loop: ``mount`` and
    ``select_category`` schedule tasks on it. Fetch results are stamped with
    a generation number and only the latest generation is ever applied, so a
    slow response for an old category cannot overwrite a newer one.
    """

    def __init__(
        self,
        client: GNewsClient,
        category_delay: float = 1.0,
        bus: Optional[InteractionBus] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize view shell."""
        self.client = client
        self.category_delay = category_delay
        self.bus = bus or InteractionBus()
        self.on_change = on_change

        self.selected_category: Optional[Category] = None
        self.dropdown_open = False
        self.loading = False
        self.categories_loading = True
        self.articles: List[Article] = []
        self.status = FetchStatus.IDLE
        self.last_error: Optional[str] = None
        self.generation = 0

        self._mounted = False
        self._torn_down = False
        self._delay_task: Optional[asyncio.Task] = None
        self._fetch_tasks: Set[asyncio.Task] = set()

    # Lifecycle

    def mount(self) -> None:
        """Start the cosmetic category delay and the initial fetch."""
        if self._mounted:
            return
        self._mounted = True
        self._delay_task = asyncio.create_task(self._finish_categories_loading())
        self._start_fetch()

    def teardown(self) -> None:
        """Cancel timers and fetches and detach page listeners."""
        if self._torn_down:
            return
        self._torn_down = True
        self._detach_outside_listener()
        if self._delay_task is not None and not self._delay_task.done():
            self._delay_task.cancel()
        for task in list(self._fetch_tasks):
            task.cancel()

    async def aclose(self) -> None:
        """Tear down and wait for cancelled tasks to unwind."""
        tasks = list(self._fetch_tasks)
        if self._delay_task is not None:
            tasks.append(self._delay_task)
        self.teardown()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def wait_idle(self) -> None:
        """Wait until no fetch is outstanding."""
        while self._fetch_tasks:
            await asyncio.gather(*list(self._fetch_tasks))

    async def wait_categories(self) -> None:
        """Wait for the cosmetic category delay to elapse."""
        if self._delay_task is not None:
            await self._delay_task

    # User input

    def select_category(self, category: Union[Category, str]) -> None:
        """Select a category, close the dropdown and refetch if needed."""
        category = Category.coerce(category)
        self._set_dropdown_open(False)

        # Reselecting the shown category only retries after a failure
        unchanged = category == self.selected_category
        self.selected_category = category
        if unchanged and self.status in (FetchStatus.LOADING, FetchStatus.SUCCESS):
            self._notify()
            return
        self._start_fetch()

    def toggle_dropdown(self) -> None:
        self._set_dropdown_open(not self.dropdown_open)

    def close_dropdown_on_outside_interaction(self, interaction: Interaction) -> None:
        """Page listener: close the dropdown on any interaction outside it."""
        if self.dropdown_open and not interaction.inside_dropdown:
            self._set_dropdown_open(False)

    def interact(self, interaction: Interaction) -> None:
        """Route a raw interaction through the page listeners."""
        self.bus.dispatch(interaction)

    # Derived state

    @property
    def selector_visible(self) -> bool:
        return not self.categories_loading and not self.loading

    @property
    def outside_listener_attached(self) -> bool:
        return self.bus.has_listener(self.close_dropdown_on_outside_interaction)

    def render(self) -> RenderableType:
        return render_view(self)

    # Internals

    def _set_dropdown_open(self, is_open: bool) -> None:
        if self.dropdown_open == is_open:
            return
        self.dropdown_open = is_open
        if is_open and not self._torn_down:
            self.bus.add_listener(self.close_dropdown_on_outside_interaction)
        else:
            self._detach_outside_listener()
        self._notify()

    def _detach_outside_listener(self) -> None:
        self.bus.remove_listener(self.close_dropdown_on_outside_interaction)

    def _start_fetch(self) -> None:
        if self._torn_down:
            return
        self.generation += 1
        self.loading = True
        self.status = FetchStatus.LOADING
        task = asyncio.create_task(self._run_fetch(self.generation, self.selected_category))
        self._fetch_tasks.add(task)
        task.add_done_callback(self._fetch_tasks.discard)
        self._notify()

    async def _run_fetch(self, generation: int, category: Optional[Category]) -> None:
        try:
            result = await self.client.fetch(category)
            if self._torn_down or generation != self.generation:
                logger.debug(
                    "Discarding stale result for generation %d (current %d)",
                    generation,
                    self.generation,
                )
                return
            self._apply_result(result)
        finally:
            # A current fetch that never applied a result must not stay in Loading
            if not self._torn_down and generation == self.generation and self.loading:
                self._apply_result(
                    FetchResult(category=category, success=False, error="Unexpected error")
                )

    def _apply_result(self, result: FetchResult) -> None:
        if result.success:
            self.articles = result.articles
            self.status = FetchStatus.SUCCESS
            self.last_error = None
        else:
            self.articles = []
            self.status = FetchStatus.FAILURE
            self.last_error = result.error
        self.loading = False
        self._notify()

    async def _finish_categories_loading(self) -> None:
        await asyncio.sleep(self.category_delay)
        self.categories_loading = False
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
