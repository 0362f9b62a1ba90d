from datetime import timedelta

import pytest

from game_browser_tool.models import HeroItem, HeroItemType
from game_browser_tool.parsers.hero import TravianOfficialHeroParser
from game_browser_tool.parsers.query import find_by_id, find_first, parse_html

HERO_PAGE = """
<html><body>
<div id="heroImageButton"><img src="hero.png"></div>
<div class="heroStatus"><i class="heroHome"></i><span>In home village</span></div>
<a class="layoutButton adventure round green" href="/hero/adventures"><div class="content">3</div></a>
<div id="heroV2">
  <a class="tabItem" data-tab="0">Attributes</a>
  <a class="tabItem active" data-tab="1">Inventory</a>
</div>
<div id="heroAdventure">
  <span class="timer" counting="down" value="125">0:02:05</span>
  <table><tbody>
    <tr><td>1</td><td>(12|-34)</td><td>0:15:00</td><td><img alt="normal" src="d.png"></td><td><button class="green">Explore</button></td></tr>
    <tr><td>2</td><td>(1|1)</td><td>0:45:00</td><td><img alt="hard" src="d.png"></td><td><button class="green">Explore</button></td></tr>
  </tbody></table>
</div>
<div class="inventoryPageWrapper">
  <div class="heroItems">
    <div class="heroItem" data-tier="consumable"><div class="itemBackground"></div><div class="item item145"></div><div class="count">1,250</div></div>
    <div class="heroItem" data-tier="consumable"><div class="itemBackground"></div><div class="item item106"></div></div>
    <div class="heroItem" data-tier="helmet"><div class="itemBackground"></div><div class="item item112"></div><div class="count">7</div></div>
    <div class="heroItem empty"><div class="itemBackground"></div><div class="item item147"></div></div>
    <div class="heroItem placeholder"><div class="itemBackground"></div><div class="item item146"></div></div>
    <div class="heroItem"><div class="itemBackground"></div><div class="item item147 rare"></div></div>
    <div class="heroItem"><div class="itemBackground"></div><div class="item itemX"></div></div>
    <div class="heroItem" data-tier="helmet"><div class="itemBackground"></div><div class="item item999"></div><div class="count">4</div></div>
    <div class="heroItem"><div class="itemBackground"></div></div>
    <div class="heroItem" data-tier="consumable"><div class="itemBackground"></div><div class="item item148"></div><div class="count">0</div></div>
    <div class="heroItem" data-tier="consumable"><div class="itemBackground"></div><div class="item item146"></div><div class="count">-</div></div>
  </div>
</div>
<form id="consumableHeroItem"><input name="amount" value="1"></form>
<div id="dialogContent">
  <div class="buttonsWrapper"><button class="grey">Cancel</button><button class="green">Use</button></div>
</div>
<button class="textButtonV2 continue">Continue</button>
</body></html>
"""


@pytest.fixture()
def parser() -> TravianOfficialHeroParser:
    return TravianOfficialHeroParser()


@pytest.fixture()
def doc():
    return parse_html(HERO_PAGE)


def test_adventure_duration_reads_timer_value(parser, doc):
    assert parser.get_adventure_duration(doc) == timedelta(seconds=125)


def test_adventure_duration_is_zero_without_timer(parser):
    assert parser.get_adventure_duration(parse_html('<div id="heroAdventure"></div>')) == timedelta(0)
    assert parser.get_adventure_duration(parse_html("<p>logged out</p>")) == timedelta(0)


def test_can_start_adventure_when_all_conditions_hold(parser, doc):
    assert parser.can_start_adventure(doc) is True


@pytest.mark.parametrize(
    "markup",
    [
        '<a class="adventure round"><div class="content">1</div></a>',
        '<div class="heroStatus"><i class="heroRunning"></i></div>'
        '<a class="adventure round"><div class="content">1</div></a>',
        '<div class="heroStatus"><i class="heroHome"></i></div>',
        '<div class="heroStatus"><i class="heroHome"></i></div><a class="adventure round"></a>',
        '<div class="heroStatus"><i class="heroHome"></i></div>'
        '<a class="adventure round disabled"><div class="content">1</div></a>',
    ],
)
def test_can_start_adventure_false_when_any_condition_missing(parser, markup):
    assert parser.can_start_adventure(parse_html(markup)) is False


def test_get_items_skips_unreadable_slots(parser, doc):
    assert list(parser.get_items(doc)) == [
        HeroItem(HeroItemType.WOOD, 1250),
        HeroItem(HeroItemType.OINTMENT, 1),
        HeroItem(HeroItemType.SMALL_BANDAGE, 1),
        HeroItem(999, 1),
        HeroItem(HeroItemType.CROP, 1),
        HeroItem(HeroItemType.CLAY, 1),
    ]


def test_get_items_is_lazy_and_empty_without_inventory(parser, doc):
    items = parser.get_items(doc)
    assert next(items) == HeroItem(HeroItemType.WOOD, 1250)
    assert list(parser.get_items(parse_html("<div></div>"))) == []


def test_get_item_slot_finds_first_matching_slot(parser, doc):
    slot = parser.get_item_slot(doc, HeroItemType.SMALL_BANDAGE)
    assert slot is not None
    assert slot["data-tier"] == "helmet"
    assert parser.get_item_slot(doc, HeroItemType.CAGE) is None
    # Empty slots are never returned even when they hold the code.
    assert parser.get_item_slot(doc, HeroItemType.IRON) is None


def test_equipment_codes_are_kept_as_raw_ints(parser, doc):
    equipment = [item for item in parser.get_items(doc) if not isinstance(item.type, HeroItemType)]
    assert equipment == [HeroItem(999, 1)]
    slot = parser.get_item_slot(doc, 999)
    assert slot is not None
    assert slot["data-tier"] == "helmet"


def test_placeholder_slots_are_skipped(parser):
    doc = parse_html(
        '<div class="heroItems">'
        '<div class="heroItem placeholder"><div class="itemBackground"></div><div class="item item146"></div></div>'
        '<div class="heroItem" data-tier="consumable"><div class="itemBackground"></div>'
        '<div class="item item146"></div><div class="count">20</div></div>'
        "</div>"
    )
    assert list(parser.get_items(doc)) == [HeroItem(HeroItemType.CLAY, 20)]
    slot = parser.get_item_slot(doc, HeroItemType.CLAY)
    assert slot is not None and "placeholder" not in slot["class"]


def test_adventure_info_and_buttons(parser, doc):
    button = parser.get_adventure(doc)
    assert button is not None and button.get_text() == "Explore"
    row = button.find_parent("tr")
    assert parser.get_adventure_info(row) == "normal - (12|-34)"


def test_adventure_info_sentinels(parser):
    row = parse_html("<table><tr><td>1</td></tr></table>").tr
    assert parser.get_adventure_info(row) == "unknown - [~|~]"
    row = parse_html("<table><tr><td>1</td><td>(3|4)</td><td>x</td></tr></table>").tr
    assert parser.get_adventure_info(row) == "unknown - (3|4)"
    row = parse_html("<table><tr><td>1</td><td>(3|4)</td><td>x</td><td><img></td></tr></table>").tr
    assert parser.get_adventure_info(row) == "unknown - (3|4)"


def test_navigation_nodes(parser, doc):
    assert parser.get_hero_adventure(doc)["href"] == "/hero/adventures"
    assert parser.get_continue_button(doc).get_text() == "Continue"
    assert parser.get_hero_avatar(doc) is find_by_id(doc, "heroImageButton")
    assert parser.inventory_tab_active(doc) is True
    assert parser.hero_inventory_loading(doc) is False


def test_inventory_state_when_missing_or_loading(parser):
    assert parser.inventory_tab_active(parse_html("<div></div>")) is False
    assert parser.hero_inventory_loading(parse_html("<div></div>")) is True
    loading = parse_html('<div class="inventoryPageWrapper loading"></div>')
    assert parser.hero_inventory_loading(loading) is True


def test_consumable_dialog(parser, doc):
    assert parser.get_amount_box(doc)["name"] == "amount"
    assert parser.get_confirm_button(doc).get_text() == "Use"
    single = parse_html('<div id="dialogContent"><div class="buttonsWrapper"><button>x</button></div></div>')
    assert parser.get_confirm_button(single) is None
    assert parser.get_amount_box(single) is None


def test_parser_does_not_modify_document(parser, doc):
    before = str(doc)
    list(parser.get_items(doc))
    parser.can_start_adventure(doc)
    parser.get_adventure_duration(doc)
    assert str(doc) == before
    assert find_first(doc, "div", "heroItems") is not None
