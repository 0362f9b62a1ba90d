import pytest

from game_browser_tool.browser.chrome import ChromeBrowser
from game_browser_tool.browser.base import SessionState
from game_browser_tool.config import BrowserConfig
from game_browser_tool.factory import build_browser, build_hero_parser, build_login_parser
from game_browser_tool.models import ServerVariant
from game_browser_tool.parsers.hero import TravianOfficialHeroParser, TTWarsHeroParser
from game_browser_tool.parsers.login import TravianOfficialLoginParser, TTWarsLoginParser


@pytest.mark.parametrize(
    ("variant", "expected"),
    [
        (ServerVariant.TRAVIAN_OFFICIAL, TravianOfficialHeroParser),
        (ServerVariant.TTWARS, TTWarsHeroParser),
        ("ttwars", TTWarsHeroParser),
    ],
)
def test_build_hero_parser(variant, expected):
    assert isinstance(build_hero_parser(variant), expected)


@pytest.mark.parametrize(
    ("variant", "expected"),
    [
        (ServerVariant.TRAVIAN_OFFICIAL, TravianOfficialLoginParser),
        (ServerVariant.TTWARS, TTWarsLoginParser),
    ],
)
def test_build_login_parser(variant, expected):
    assert isinstance(build_login_parser(variant), expected)


def test_unknown_variant_is_rejected():
    with pytest.raises(ValueError, match="Unsupported server variant"):
        build_hero_parser("legends")
    with pytest.raises(ValueError):
        build_login_parser("legends")


def test_build_browser_does_not_launch(tmp_path):
    browser = build_browser(BrowserConfig(cache_root=tmp_path))
    assert isinstance(browser, ChromeBrowser)
    assert browser.state is SessionState.UNINITIALIZED
    assert not any(tmp_path.iterdir())
