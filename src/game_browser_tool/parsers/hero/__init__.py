"""Hero page parsers, one per server variant."""

from .base import HeroParser
from .travian_official import TravianOfficialHeroParser
from .ttwars import TTWarsHeroParser

__all__ = ["HeroParser", "TTWarsHeroParser", "TravianOfficialHeroParser"]
