"""Browser session abstractions."""

from __future__ import annotations

import enum
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from bs4 import BeautifulSoup

from ..result import Outcome

Condition = Callable[[Any], bool]


class SessionState(str, enum.Enum):
    """Lifecycle of a controller's browser session."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CLOSED = "closed"


class BrowserController(ABC):
    """Interface for driving one browser session, one operation at a time.

    Every operation reports problems through its returned outcome; browser
    faults are never raised to the caller.
    """

    @property
    @abstractmethod
    def state(self) -> SessionState:
        """Current lifecycle state."""

    @property
    @abstractmethod
    def current_url(self) -> str:
        """URL of the page, or an empty string without a session."""

    @property
    @abstractmethod
    def document(self) -> BeautifulSoup:
        """Last snapshot taken with :meth:`snapshot`."""

    @abstractmethod
    def setup(self) -> Outcome[None]:
        """Launch the browser session."""

    @abstractmethod
    def shutdown(self) -> None:
        """Close the browser session; safe to call more than once."""

    @abstractmethod
    def is_open(self) -> bool:
        """Whether the session still answers."""

    @abstractmethod
    def snapshot(self) -> BeautifulSoup:
        """Re-parse the live page into :attr:`document` and return it."""

    @abstractmethod
    def navigate(self, url: str = "", cancel: Optional[threading.Event] = None) -> Outcome[None]:
        """Open ``url`` (the current page when empty) and wait until it has loaded."""

    @abstractmethod
    def click(self, selector: str) -> Outcome[None]:
        """Click the first element matching ``selector``."""

    @abstractmethod
    def input_text(self, selector: str, text: str) -> Outcome[None]:
        """Replace the content of the first element matching ``selector``."""

    @abstractmethod
    def wait_until(self, condition: Condition, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        """Poll ``condition`` against the page until it holds."""

    @abstractmethod
    def wait_page_loaded(self, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        """Wait for the document ready-state to become ``complete``."""

    @abstractmethod
    def wait_url_contains(self, part: str, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        """Wait for the URL to contain ``part`` and the new page to load."""

    def refresh(self, cancel: Optional[threading.Event] = None) -> Outcome[None]:
        return self.navigate("", cancel)

    def __enter__(self) -> "BrowserController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
