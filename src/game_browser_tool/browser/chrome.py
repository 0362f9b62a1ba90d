"""Playwright-powered Chromium session controller."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Optional

from bs4 import BeautifulSoup
from playwright.sync_api import Error, Locator, sync_playwright

from ..config import BrowserConfig
from ..parsers.query import parse_html
from ..result import (
    Failed,
    FailureKind,
    Ok,
    Outcome,
    element_not_clickable,
    element_not_found,
    stop,
    trace_marker,
)
from ..result import cancel as cancelled
from .base import BrowserController, Condition, SessionState

LOGGER = logging.getLogger(__name__)

LAUNCH_TIMEOUT = 60.0

# Hide automation traces from the game and keep the browser quiet and stable.
STEALTH_ARGS = (
    "--disable-blink-features=AutomationControlled",
    "--disable-features=UserAgentClientHint",
    "--disable-logging",
    "--ignore-certificate-errors",
    "--mute-audio",
    "--disable-gpu",
    "--no-default-browser-check",
    "--no-first-run",
    "--no-sandbox",
    "--test-type",
)


class ChromeBrowser(BrowserController):
    """Browser controller backed by a persistent Playwright Chromium context."""

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ) -> None:
        self._config = config or BrowserConfig()
        self._playwright_factory = playwright_factory
        self._state = SessionState.UNINITIALIZED
        self._playwright = None
        self._context = None
        self._page = None
        self._document = parse_html("")

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def page(self):
        """The live Playwright page, ``None`` outside of a session."""

        return self._page

    @property
    def current_url(self) -> str:
        if self._page is None:
            return ""
        return self._page.url

    @property
    def document(self) -> BeautifulSoup:
        return self._document

    def setup(self) -> Outcome[None]:
        if self._state is not SessionState.UNINITIALIZED:
            return stop(f"Browser session is already {self._state.value}")
        user_data_dir = self._config.user_data_dir()
        LOGGER.info("Launching Chromium with profile %s", user_data_dir)
        playwright = None
        try:
            user_data_dir.mkdir(parents=True, exist_ok=True)
            playwright = self._playwright_factory().start()
            context = playwright.chromium.launch_persistent_context(
                str(user_data_dir),
                **self._launch_options(),
            )
            context.set_default_navigation_timeout(_to_timeout(self._config.page_load_timeout))
            pages = context.pages
            page = pages[0] if pages else context.new_page()
        except Exception as exc:
            LOGGER.error("Failed to launch browser: %s", exc)
            if playwright is not None:
                try:
                    playwright.stop()
                except Error as stop_exc:
                    LOGGER.warning("Playwright did not stop cleanly: %s", stop_exc)
            return stop(str(exc))
        self._playwright = playwright
        self._context = context
        self._page = page
        self._state = SessionState.READY
        return Ok()

    def shutdown(self) -> None:
        if self._state is not SessionState.READY:
            return
        LOGGER.debug("Shutting down browser session")
        try:
            self._context.close()
        except Error as exc:
            LOGGER.warning("Browser context did not close cleanly: %s", exc)
        try:
            self._playwright.stop()
        except Error as exc:
            LOGGER.warning("Playwright did not stop cleanly: %s", exc)
        self._context = None
        self._playwright = None
        self._page = None
        self._state = SessionState.CLOSED

    def is_open(self) -> bool:
        if self._page is None:
            return False
        try:
            self._page.title()
        except Exception:
            LOGGER.debug("Browser session does not answer", exc_info=True)
            return False
        return True

    def snapshot(self) -> BeautifulSoup:
        if self._page is None:
            return self._document
        try:
            self._document = parse_html(self._page.content())
        except Exception:
            LOGGER.warning("Keeping previous page snapshot", exc_info=True)
        return self._document

    def navigate(self, url: str = "", cancel: Optional[threading.Event] = None) -> Outcome[None]:
        if self._state is not SessionState.READY:
            return self._not_ready()
        if not url:
            url = self.current_url
        LOGGER.info("Navigating to %s", url)
        try:
            self._page.goto(url, wait_until="commit")
        except Error as exc:
            LOGGER.warning("Navigation to %s failed: %s", url, exc)
            return stop(str(exc))
        loaded = self.wait_page_loaded(cancel)
        if isinstance(loaded, Failed):
            return loaded.traced()
        return loaded

    def click(self, selector: str) -> Outcome[None]:
        located = self._locate(selector)
        if isinstance(located, Failed):
            return located.traced()
        try:
            located.value.click()
        except Error as exc:
            return stop(str(exc))
        return Ok()

    def input_text(self, selector: str, text: str) -> Outcome[None]:
        located = self._locate(selector)
        if isinstance(located, Failed):
            return located.traced()
        element = located.value
        try:
            element.select_text()
            if text:
                element.press_sequentially(text)
            else:
                element.press("Delete")
        except Error as exc:
            return stop(str(exc))
        return Ok()

    def wait_until(self, condition: Condition, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        if self._state is not SessionState.READY:
            return self._not_ready()
        # A token that is already set ends the wait as satisfied without polling.
        if cancel is not None and cancel.is_set():
            return Ok()
        timeout = self._config.wait_timeout
        deadline = time.monotonic() + timeout
        while True:
            if cancel is not None and cancel.is_set():
                LOGGER.info("Wait cancelled")
                return cancelled()
            try:
                satisfied = self._check(condition)
            except Exception as exc:
                LOGGER.warning("Wait condition failed: %s", exc)
                return stop(f"Wait condition failed: {exc}")
            if satisfied:
                return Ok()
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return stop(f"Page not loaded in {timeout:g} seconds")
            pause = min(self._config.poll_interval, remaining)
            if cancel is not None:
                cancel.wait(pause)
            else:
                time.sleep(pause)

    def wait_page_loaded(self, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        outcome = self.wait_until(_page_loaded, cancel)
        if isinstance(outcome, Failed):
            return outcome.traced()
        return outcome

    def wait_url_contains(self, part: str, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        outcome = self.wait_until(lambda page: part in page.url, cancel)
        if isinstance(outcome, Failed):
            return outcome.traced()
        outcome = self.wait_page_loaded(cancel)
        if isinstance(outcome, Failed):
            return outcome.traced()
        return outcome

    def _locate(self, selector: str) -> Outcome[Locator]:
        if self._state is not SessionState.READY:
            return self._not_ready()
        try:
            elements = self._page.locator(selector)
            if elements.count() == 0:
                return element_not_found(selector)
            element = elements.first
            if not element.is_visible() or not element.is_enabled():
                return element_not_clickable(selector)
        except Error as exc:
            return stop(str(exc))
        return Ok(element)

    def _check(self, condition: Condition) -> bool:
        try:
            return bool(condition(self._page))
        except Error as exc:
            # Evaluating while the page navigates destroys the execution context.
            LOGGER.debug("Condition raised, polling again: %s", exc)
            return False

    def _not_ready(self) -> Failed:
        message = f"Browser is not ready ({self._state.value})"
        return Failed(FailureKind.STOP, message, (trace_marker(depth=2),))

    def _launch_options(self) -> dict[str, Any]:
        config = self._config
        args = list(STEALTH_ARGS)
        options: dict[str, Any] = {
            "headless": config.headless,
            "ignore_default_args": ["--enable-automation"],
            "ignore_https_errors": True,
            "timeout": _to_timeout(LAUNCH_TIMEOUT),
        }
        if not config.headless:
            args.append("--start-maximized")
            options["no_viewport"] = True
        if config.extensions:
            paths = ",".join(str(path) for path in config.extensions)
            args.extend([f"--disable-extensions-except={paths}", f"--load-extension={paths}"])
        options["args"] = args
        if config.user_agent:
            options["user_agent"] = config.user_agent
        proxy = config.proxy_settings()
        if proxy:
            options["proxy"] = proxy
        return options


def _page_loaded(page) -> bool:
    return page.evaluate("document.readyState") == "complete"


def _to_timeout(seconds: float) -> int:
    return int(seconds * 1000)
