"""Factories for constructing components from configuration."""

from __future__ import annotations

from .browser.chrome import ChromeBrowser
from .config import BrowserConfig
from .models import ServerVariant
from .parsers.hero import HeroParser, TravianOfficialHeroParser, TTWarsHeroParser
from .parsers.login import LoginPageParser, TravianOfficialLoginParser, TTWarsLoginParser

HERO_PARSERS: dict[ServerVariant, type[HeroParser]] = {
    ServerVariant.TRAVIAN_OFFICIAL: TravianOfficialHeroParser,
    ServerVariant.TTWARS: TTWarsHeroParser,
}

LOGIN_PARSERS: dict[ServerVariant, type[LoginPageParser]] = {
    ServerVariant.TRAVIAN_OFFICIAL: TravianOfficialLoginParser,
    ServerVariant.TTWARS: TTWarsLoginParser,
}


def build_hero_parser(variant: ServerVariant | str) -> HeroParser:
    parser = HERO_PARSERS.get(_variant(variant))
    if parser is None:
        raise ValueError(f"No hero parser for server variant: {variant}")
    return parser()


def build_login_parser(variant: ServerVariant | str) -> LoginPageParser:
    parser = LOGIN_PARSERS.get(_variant(variant))
    if parser is None:
        raise ValueError(f"No login parser for server variant: {variant}")
    return parser()


def build_browser(config: BrowserConfig) -> ChromeBrowser:
    return ChromeBrowser(config)


def _variant(value: ServerVariant | str) -> ServerVariant:
    try:
        return ServerVariant(value)
    except ValueError as exc:
        raise ValueError(f"Unsupported server variant: {value}") from exc
