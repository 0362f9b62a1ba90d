"""Login page parser abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup, Tag


class LoginPageParser(ABC):
    """Locates the login form controls of a server variant."""

    @abstractmethod
    def get_username_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Account name input."""

    @abstractmethod
    def get_password_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Password input."""

    @abstractmethod
    def get_login_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Button submitting the login form."""
