"""Playwright browser host: wires page events into the navigation agent."""

import asyncio
import logging
from typing import Any, Dict
from urllib.parse import urljoin

from playwright.async_api import BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from .agent import NavigatorAgent
from .client import RandomArticleClient
from .config import Config

logger = logging.getLogger(__name__)

PAGE_SHOW_BINDING = "__randomNewsPageShow"
KEY_UP_BINDING = "__randomNewsKeyUp"

# Runs in every document before page scripts. Child frames are skipped so
# only the top-level document drives navigation.
PAGE_HOOKS_SCRIPT = f"""
(() => {{
  if (window !== window.top) return;
  window.addEventListener("pageshow", (e) => {{
    window.{PAGE_SHOW_BINDING}(String(window.location), e.persisted);
  }});
  window.addEventListener("keyup", (e) => {{
    window.{KEY_UP_BINDING}(e.keyCode);
  }});
}})();
"""

CHROMIUM_ARGS = [
    "--disable-dev-shm-usage",
    "--no-sandbox",
    "--disable-setuid-sandbox",
]


class PageNavigator:
    """Navigates a single Playwright page."""

    def __init__(self, page: Page, timeout_ms: int = 60000):
        self.page = page
        self.timeout_ms = timeout_ms

    async def navigate(self, url: str) -> None:
        """Replace the current document with ``url``; failures are logged.

        ``url`` is resolved against the current page, so relative targets work
        and an empty one reloads.
        """
        target = urljoin(self.page.url, url)
        try:
            await self.page.goto(target, timeout=self.timeout_ms)
        except PlaywrightError as e:
            logger.warning(f"Navigation to {target!r} failed: {e}")


async def install_page_hooks(context: BrowserContext, agent: NavigatorAgent) -> None:
    """Expose the agent's handlers to every page in ``context``."""

    def page_show(source: Dict[str, Any], location: str, persisted: bool) -> None:
        agent.on_page_show(location, bool(persisted))

    def key_up(source: Dict[str, Any], key_code: int) -> None:
        agent.on_key_up(int(key_code))

    await context.expose_binding(PAGE_SHOW_BINDING, page_show)
    await context.expose_binding(KEY_UP_BINDING, key_up)
    await context.add_init_script(PAGE_HOOKS_SCRIPT)


class BrowserHost:
    """Owns the browser for the lifetime of the agent."""

    def __init__(self, config: Config):
        """Initialize host with configuration."""
        self.config = config

    def launch_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"headless": self.config.headless}
        if self.config.browser == "chromium":
            options["args"] = list(CHROMIUM_ARGS)
        return options

    async def start(self, agent: NavigatorAgent, navigator: PageNavigator) -> None:
        """Open the first document."""
        if self.config.start_url:
            logger.info(f"Opening start page: {self.config.start_url}")
            await navigator.navigate(self.config.start_url)
        else:
            agent.trigger_random_navigation(self.config.key_delay_ms)

    async def run(self) -> None:
        """Run the browser until its page is closed or the task is cancelled."""
        logger.info("Starting Random News agent")
        logger.info(f"Endpoint: {self.config.endpoint_url}")
        logger.info(f"Browser: {self.config.browser} (headless={self.config.headless})")

        async with async_playwright() as p:
            browser_type = getattr(p, self.config.browser)
            browser = await browser_type.launch(**self.launch_options())

            client = RandomArticleClient(self.config)
            agent = None
            try:
                context = await browser.new_context()
                page = await context.new_page()
                navigator = PageNavigator(page, self.config.navigation_timeout_ms)
                agent = NavigatorAgent(self.config, client, navigator)
                await install_page_hooks(context, agent)

                closed = asyncio.Event()
                page.on("close", lambda _: closed.set())
                browser.on("disconnected", lambda _: closed.set())

                await self.start(agent, navigator)
                await closed.wait()
                logger.info("Page closed")

            except asyncio.CancelledError:
                logger.info("Agent shutdown requested")
            finally:
                if agent is not None:
                    await agent.close()
                await client.close()
                if browser.is_connected():
                    await browser.close()
                logger.info("Browser closed")
