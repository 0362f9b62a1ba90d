"""Login page parser for TTWars servers."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..query import find_by_id, find_first
from .base import LoginPageParser


class TTWarsLoginParser(LoginPageParser):
    def get_username_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "input", attrs={"name": "user"})

    def get_password_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "input", attrs={"name": "pw"})

    def get_login_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_by_id(doc, "s1")
