"""Hero page parser abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from ...models import HeroItem, HeroItemType
from ..query import classes_of, digits

UNKNOWN_DIFFICULTY = "unknown"
UNKNOWN_COORDINATES = "[~|~]"


class HeroParser(ABC):
    """Questions about the hero that every server variant can answer from a page snapshot.

    Implementations only read the document. Missing optional elements are
    answered with a neutral value (zero duration, ``False``, ``None`` or an
    empty iterator) rather than an exception.
    """

    @abstractmethod
    def get_adventure_duration(self, doc: BeautifulSoup) -> timedelta:
        """Remaining time before the hero returns from an adventure."""

    @abstractmethod
    def can_start_adventure(self, doc: BeautifulSoup) -> bool:
        """Hero is at home and an adventure can be launched right now."""

    @abstractmethod
    def get_hero_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Link opening the adventure list."""

    @abstractmethod
    def get_continue_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Button confirming the adventure after it has been chosen."""

    @abstractmethod
    def get_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Start button of the first adventure in the list."""

    @abstractmethod
    def get_adventure_info(self, node: Tag) -> str:
        """Readable ``"difficulty - coordinates"`` summary of an adventure row."""

    @abstractmethod
    def inventory_tab_active(self, doc: BeautifulSoup) -> bool:
        """The inventory tab of the hero page is selected."""

    @abstractmethod
    def hero_inventory_loading(self, doc: BeautifulSoup) -> bool:
        """The inventory is still being fetched by the client."""

    @abstractmethod
    def get_hero_avatar(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Avatar button opening the hero page."""

    @abstractmethod
    def get_item_slot(self, doc: BeautifulSoup, item_type: HeroItemType | int) -> Optional[Tag]:
        """First occupied inventory slot holding ``item_type``."""

    @abstractmethod
    def get_amount_box(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Amount input of the dialog shown when using a consumable."""

    @abstractmethod
    def get_confirm_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        """Confirm button of the consumable dialog."""

    @abstractmethod
    def get_items(self, doc: BeautifulSoup) -> Iterator[HeroItem]:
        """Yield one item per readable, occupied inventory slot."""


def decode_item_code(item_node: Optional[Tag]) -> Optional[int]:
    """Read the code from a class list like ``item item145``.

    The node must carry exactly two classes; the code is the digits of the
    second one.
    """

    classes = classes_of(item_node)
    if len(classes) != 2:
        return None
    code = digits(classes[1])
    if not code:
        return None
    return int(code)


def decode_item_type(item_node: Optional[Tag]) -> HeroItemType | int | None:
    """Known codes map to :class:`HeroItemType`; equipment and other codes stay raw ints."""

    code = decode_item_code(item_node)
    if code is None:
        return None
    item_type = HeroItemType.from_code(code)
    if item_type is None:
        return code
    return item_type


def decode_amount(amount_node: Optional[Tag]) -> int:
    """Quantity shown in ``amount_node``; 1 when it is absent or not a positive number."""

    if amount_node is None:
        return 1
    value = digits(amount_node.get_text())
    if not value or int(value) <= 0:
        return 1
    return int(value)


def format_adventure_info(cells: list[Tag], difficulty_attribute: str) -> str:
    if len(cells) < 4:
        difficulty = UNKNOWN_DIFFICULTY
    else:
        icon = cells[3].find(True)
        value = icon.get(difficulty_attribute) if icon is not None else None
        difficulty = value if isinstance(value, str) and value else UNKNOWN_DIFFICULTY
    if len(cells) < 2:
        coordinates = UNKNOWN_COORDINATES
    else:
        coordinates = cells[1].get_text(strip=True)
    return f"{difficulty} - {coordinates}"
