"""Login page parser for the official Travian servers."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..query import find_first
from .base import LoginPageParser


class TravianOfficialLoginParser(LoginPageParser):
    def get_username_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "input", attrs={"name": "name"})

    def get_password_node(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "input", attrs={"name": "password"})

    def get_login_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        form = find_first(doc, "form", attrs={"name": "loginForm"})
        return find_first(form, "button", attrs={"type": "submit"})
