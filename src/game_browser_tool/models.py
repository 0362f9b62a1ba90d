"""Shared models used across the game browser tool."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ServerVariant(str, enum.Enum):
    """Markup dialects served by the supported game server software."""

    TRAVIAN_OFFICIAL = "travian_official"
    TTWARS = "ttwars"


class HeroItemType(enum.IntEnum):
    """Item codes embedded in the hero inventory markup."""

    OINTMENT = 106
    SCROLL = 107
    BUCKET = 108
    TABLET_OF_LAW = 109
    BOOK_OF_WISDOM = 110
    ARTWORK = 111
    SMALL_BANDAGE = 112
    BANDAGE = 113
    CAGE = 114
    WOOD = 145
    CLAY = 146
    IRON = 147
    CROP = 148

    @classmethod
    def from_code(cls, code: int) -> "HeroItemType | None":
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True)
class HeroItem:
    """One occupied slot of the hero inventory.

    ``type`` is a plain ``int`` for codes outside :class:`HeroItemType`, such as equipment.
    """

    type: HeroItemType | int
    amount: int = 1
