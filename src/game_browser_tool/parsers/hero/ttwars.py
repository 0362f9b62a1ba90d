"""Hero page parser for TTWars servers."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from ...models import HeroItem, HeroItemType
from ..query import (
    classes_of,
    element_children,
    find_all,
    find_by_id,
    find_first,
    has_classes,
    int_attribute,
)
from .base import HeroParser, decode_amount, decode_item_code, decode_item_type, format_adventure_info


class TTWarsHeroParser(HeroParser):
    """Reads the classic server-rendered hero markup used by TTWars."""

    def get_adventure_duration(self, doc: BeautifulSoup) -> timedelta:
        sidebar = find_by_id(doc, "sidebarBoxHero")
        message = find_first(sidebar, "div", "heroStatusMessage")
        timer = find_first(message, "span", "timer")
        if timer is None:
            return timedelta(0)
        return timedelta(seconds=int_attribute(timer, "value"))

    def get_continue_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_by_id(doc, "start")

    def get_hero_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        sidebar = find_by_id(doc, "sidebarBoxHero")
        return find_first(sidebar, "button", "adventureWhite")

    def can_start_adventure(self, doc: BeautifulSoup) -> bool:
        sidebar = find_by_id(doc, "sidebarBoxHero")
        message = find_first(sidebar, "div", "heroStatusMessage")
        at_home = any(
            name.startswith("heroStatus100")
            for icon in find_all(message, "img")
            for name in classes_of(icon)
        )
        if not at_home:
            return False
        button = self.get_hero_adventure(doc)
        if button is None or has_classes(button, "disabled"):
            return False
        return find_first(button, "div", "speechBubbleContent") is not None

    def get_adventure(self, doc: BeautifulSoup) -> Optional[Tag]:
        table = find_by_id(doc, "adventureListForm")
        tbody = find_first(table, "tbody")
        row = find_first(tbody, "tr")
        return find_first(row, "a", "gotoAdventure")

    def get_adventure_info(self, node: Tag) -> str:
        return format_adventure_info(find_all(node, "td"), "title")

    def inventory_tab_active(self, doc: BeautifulSoup) -> bool:
        navigation = find_first(doc, "div", "contentNavi")
        tab = find_first(navigation, "a", attrs={"data-tab": "1"})
        return has_classes(tab, "active")

    def hero_inventory_loading(self, doc: BeautifulSoup) -> bool:
        inventory = find_by_id(doc, "itemsToSale")
        if inventory is None:
            return True
        return has_classes(inventory, "loading")

    def get_hero_avatar(self, doc: BeautifulSoup) -> Optional[Tag]:
        return find_first(doc, "a", "heroImageButton")

    def get_item_slot(self, doc: BeautifulSoup, item_type: HeroItemType | int) -> Optional[Tag]:
        for slot in self._item_slots(doc):
            children = element_children(slot)
            if children and decode_item_code(children[0]) == int(item_type):
                return slot
        return None

    def get_amount_box(self, doc: BeautifulSoup) -> Optional[Tag]:
        dialog = find_by_id(doc, "dialogContent")
        return find_first(dialog, "input", attrs={"name": "amount"})

    def get_confirm_button(self, doc: BeautifulSoup) -> Optional[Tag]:
        dialog = find_by_id(doc, "dialogContent")
        return find_first(dialog, "button", "dialogButtonOk")

    def get_items(self, doc: BeautifulSoup) -> Iterator[HeroItem]:
        for slot in self._item_slots(doc):
            children = element_children(slot)
            if not children:
                continue
            item_type = decode_item_type(children[0])
            if item_type is None:
                continue
            amount = 1
            if has_classes(slot, "consumable"):
                amount = decode_amount(find_first(slot, "span", "amount"))
            yield HeroItem(type=item_type, amount=amount)

    def _item_slots(self, doc: BeautifulSoup) -> list[Tag]:
        inventory = find_by_id(doc, "itemsToSale")
        return [
            slot
            for slot in find_all(inventory, "div", "heroItem")
            if not has_classes(slot, "empty") and not has_classes(slot, "placeholder")
        ]
