"""Hero page parser for the official Travian servers."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from ...models import HeroItem, HeroItemType
from ..query import (
    element_children,
    find_all,
    find_by_id,
    find_first,
    has_classes,
    int_attribute,
)
from .base import HeroParser, decode_amount, decode_item_code, decode_item_type, format_adventure_info

LOGGER = logging.getLogger(__name__)


class TravianOfficialHeroParser(HeroParser):
    """Reads the React based hero markup of travian.com servers."""

    def get_adventure_duration(self, doc: BeautifulSoup) -> timedelta:
        hero_adventure = find_by_id(doc, "heroAdventure")
        timer = find_first(hero_adventure, "span", "timer")
        if timer is None:
            return timedelta(0)
        return timedelta(seconds=int_attribute(timer, "value"))

    def get_continue_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "button", "continue")

    def get_hero_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "a", "adventure", "round")

    def can_start_adventure(self, doc: BeautifulSoup) -> bool:
        status = find_first(doc, "div", "heroStatus")
        if status is None:
            return False
        if find_first(status, "i", "heroHome") is None:
            return False
        adventure = self.get_hero_adventure(doc)
        if adventure is None or has_classes(adventure, "disabled"):
            return False
        # The count bubble only renders while adventures are waiting.
        return find_first(adventure, "div", "content") is not None

    def get_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        adventures = find_by_id(doc, "heroAdventure")
        tbody = find_first(adventures, "tbody")
        row = find_first(tbody, "tr")
        return find_first(row, "button")

    def get_adventure_info(self, node: Tag) -> str:
        return format_adventure_info(find_all(node, "td"), "alt")

    def inventory_tab_active(self, doc: BeautifulSoup) -> bool:
        hero = find_by_id(doc, "heroV2")
        tab = find_first(hero, "a", attrs={"data-tab": "1"})
        return has_classes(tab, "active")

    def hero_inventory_loading(self, doc: BeautifulSoup) -> bool:
        wrapper = find_first(doc, "div", "inventoryPageWrapper")
        if wrapper is None:
            return True
        return has_classes(wrapper, "loading")

    def get_hero_avatar(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_by_id(doc, "heroImageButton")

    def get_item_slot(self, doc: BeautifulSoup, item_type: HeroItemType | int) -> Optional[Tag]:
        for slot in self._item_slots(doc):
            children = element_children(slot)
            if len(children) < 2:
                continue
            if decode_item_code(children[1]) == int(item_type):
                return slot
        return None

    def get_amount_box(self, doc: BeautifulSoup) -> Optional[Tag]:
        form = find_by_id(doc, "consumableHeroItem")
        return find_first(form, "input")

    def get_confirm_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        dialog = find_by_id(doc, "dialogContent")
        wrapper = find_first(dialog, "div", "buttonsWrapper")
        buttons = find_all(wrapper, "button")
        if len(buttons) < 2:
            return None
        return buttons[1]

    def get_items(self, doc: BeautifulSoup) -> Iterator[HeroItem]:
        for slot in self._item_slots(doc):
            children = element_children(slot)
            if len(children) < 2:
                LOGGER.debug("Skipping inventory slot without an item node")
                continue
            item_type = decode_item_type(children[1])
            if item_type is None:
                continue
            amount = 1
            tier = slot.get("data-tier")
            if isinstance(tier, str) and "consumable" in tier and len(children) > 2:
                amount = decode_amount(children[2])
            yield HeroItem(type=item_type, amount=amount)

    def _item_slots(self, doc: BeautifulSoup) -> list[Tag]:
        items = find_first(doc, "div", "heroItems")
        return [
            slot
            for slot in find_all(items, "div", "heroItem")
            if not has_classes(slot, "empty") and not has_classes(slot, "placeholder")
        ]
