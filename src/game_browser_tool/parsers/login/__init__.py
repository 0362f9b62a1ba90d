"""Login page parsers, one per server variant."""

from .base import LoginPageParser
from .travian_official import TravianOfficialLoginParser
from .ttwars import TTWarsLoginParser

__all__ = ["LoginPageParser", "TTWarsLoginParser", "TravianOfficialLoginParser"]
