import pytest

from tombeau.errors import ErrorCode, GameError
from tombeau.item import Item, Stat
from tombeau.selection import ItemSelection


def _items():
    spec = [
        ("item/bag.png", Stat.HP),
        ("item/amulatte.png", Stat.INTELLIGENCE),
        ("item/armure.png", Stat.ARMOUR),
        ("item/bouc.png", Stat.ARMOUR),
        ("item/coupe.png", Stat.INTELLIGENCE),
        ("item/epee.png", Stat.STRENGTH),
        ("item/fromage.png", Stat.HP),
        ("item/gant.png", Stat.AGILITY),
        ("item/gelano.png", Stat.INTELLIGENCE),
    ]
    items = []
    for name, stat in spec:
        item = Item(name)
        item.add_modifier(stat, 1)
        items.append(item)
    return items


def test_choose_three_items_and_add_them():
    items = _items()
    selection = ItemSelection(items, 3)
    for index in (5, 1, 7):
        assert selection.toggle(index) is True
    assert selection.complete
    assert selection.chosen() == [1, 5, 7]
    inventory = []
    selection.apply(inventory)
    assert [item.name for item in inventory] == [
        "item/amulatte.png", "item/epee.png", "item/gant.png"
    ]


def test_toggle_twice_unpicks():
    selection = ItemSelection(_items(), 3)
    selection.toggle(2)
    assert selection.toggle(2) is False
    assert selection.active_count == 0
    assert selection.chosen() == []


def test_zero_count_is_rejected():
    with pytest.raises(GameError) as info:
        ItemSelection(_items(), 0)
    assert info.value.code is ErrorCode.ARGUMENT


def test_out_of_range_toggle():
    selection = ItemSelection(_items(), 1)
    with pytest.raises(GameError):
        selection.toggle(9)
    with pytest.raises(GameError):
        selection.toggle(-1)


def test_apply_before_complete_is_rejected():
    selection = ItemSelection(_items(), 2)
    selection.toggle(0)
    with pytest.raises(GameError):
        selection.apply([])


def test_negative_count_removes_positions():
    items = _items()
    selection = ItemSelection(items, -1)
    assert selection.remove is True
    assert selection.count == 1
    selection.toggle(1)
    inventory = list(items[:3])
    selection.apply(inventory)
    assert [item.name for item in inventory] == ["item/bag.png", "item/armure.png"]


def test_removing_missing_position_fails():
    selection = ItemSelection(_items(), -1)
    selection.toggle(8)
    with pytest.raises(GameError):
        selection.apply([])