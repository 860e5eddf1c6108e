"""Navigation agent: turns page and keyboard events into random navigations."""

import asyncio
import logging
from enum import IntEnum
from typing import Awaitable, Callable, Optional, Protocol, Set

from .client import RandomArticleClient
from .config import Config
from .state import AgentState, QuitStatus

logger = logging.getLogger(__name__)


class KeyCode(IntEnum):
    """Key codes the agent reacts to on key up."""

    SPACE = 32
    CONTINUE = 67  # c
    QUIT = 81  # q


class Navigator(Protocol):
    """Something that can send the browser to a URL."""

    async def navigate(self, url: str) -> None: ...


class NavigatorAgent:
    """Schedules delayed fetch-and-navigate tasks in response to page events.

    Every trigger creates an independent pending task. Key presses never
    cancel earlier tasks, so several can race and the last one to navigate
    wins. Showing a new document drops whatever the previous document had
    scheduled (see ``on_document_replaced``).
    """

    def __init__(
        self,
        config: Config,
        client: RandomArticleClient,
        navigator: Navigator,
        state: Optional[AgentState] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize agent with configuration and collaborators."""
        self.config = config
        self.client = client
        self.navigator = navigator
        self.state = state if state is not None else AgentState()
        self._sleep = sleep
        self._pending: Set[asyncio.Task] = set()
        self._navigating: Set[asyncio.Task] = set()

    @property
    def pending(self) -> Set[asyncio.Task]:
        return set(self._pending)

    def resolve_delay(self, delay_ms: Optional[int] = None) -> int:
        """Return the delay to use; None and zero mean default.

        Negative delays are kept and fire at once.
        """
        if delay_ms is None or delay_ms == 0:
            return self.config.default_delay_ms
        return delay_ms

    def trigger_random_navigation(self, delay_ms: Optional[int] = None) -> asyncio.Task:
        """Wait ``delay_ms`` then navigate to a freshly fetched random article."""
        delay = self.resolve_delay(delay_ms)
        logger.debug(f"Scheduling random navigation in {delay}ms")

        task = asyncio.create_task(self._navigate_after(delay))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _navigate_after(self, delay_ms: int) -> None:
        await self._sleep(delay_ms / 1000)

        try:
            target = await self.client.fetch_target()
            if target is None:
                return

            logger.info(f"Navigating to {target}")
            task = asyncio.current_task()
            self._navigating.add(task)
            try:
                await self.navigator.navigate(target)
            finally:
                self._navigating.discard(task)
        except Exception as e:
            logger.error(f"Random navigation failed: {e}")

    def on_page_show(self, location: str = "", persisted: bool = False) -> asyncio.Task:
        """Handle a page-show event, including back/forward cache restores.

        A shown page is a new document, so timers left over from the
        previous one are dropped before the new delay is scheduled.
        """
        self.on_document_replaced()
        if persisted:
            logger.info(f"Page restored from cache: {location}")
        else:
            logger.info(f"Page shown: {location}")
        return self.trigger_random_navigation()

    def on_key_up(self, key_code: int) -> Optional[asyncio.Task]:
        """Handle a key-up event by key code."""
        if key_code == KeyCode.SPACE:
            return self.trigger_random_navigation(self.config.key_delay_ms)

        if key_code == KeyCode.QUIT:
            self.state.set_quit_status(QuitStatus.PAUSED)
            return None

        if key_code == KeyCode.CONTINUE:
            self.state.set_quit_status(QuitStatus.RUNNING)
            return self.trigger_random_navigation(self.config.key_delay_ms)

        return None

    def on_document_replaced(self) -> int:
        """Cancel tasks scheduled by the document that was just replaced.

        A task that is itself performing the navigation is left alone.
        Returns the number of tasks cancelled.
        """
        cancelled = 0
        for task in list(self._pending):
            if task in self._navigating or task.done():
                continue
            task.cancel()
            cancelled += 1

        if cancelled:
            logger.debug(f"Dropped {cancelled} pending navigation(s) from previous document")
        return cancelled

    async def close(self) -> None:
        """Cancel all pending tasks and wait for them to finish."""
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
