import pytest

from quadsim.inventory import Fit, Loadout, Refit, Unfit


def item_of(loadout, slot_id):
    return next(slot.item for _, slot in loadout.slots if slot.id == slot_id)


def test_default_slots():
    loadout = Loadout()
    labels = [label for label, _ in loadout.slots]
    assert labels[0] == "Left Mouse Button"
    assert labels[3] == "Space"
    assert len(labels) == 7
    ids = [slot.id for _, slot in loadout.slots]
    assert len(set(ids)) == len(ids)
    assert all(slot.item is None for _, slot in loadout.slots)


def test_buy_appends_in_order():
    loadout = Loadout()
    loadout.buy("Item 1")
    loadout.buy("Item 2")
    assert loadout.inventory == ["Item 1", "Item 2"]


def test_fit_puts_item_into_slot_and_keeps_inventory():
    loadout = Loadout()
    loadout.buy("Item 3")
    slot_id = loadout.slots[2][1].id
    loadout.apply(Fit(target_slot=slot_id, item="Item 3"))
    assert item_of(loadout, slot_id) == "Item 3"
    assert loadout.inventory == ["Item 3"]


def test_unfit_clears_slot():
    loadout = Loadout()
    slot_id = loadout.slots[0][1].id
    loadout.set_item(slot_id, "Item 0")
    loadout.apply(Unfit(target_slot=slot_id))
    assert item_of(loadout, slot_id) is None


def test_refit_moves_item():
    loadout = Loadout()
    origin = loadout.slots[0][1].id
    target = loadout.slots[4][1].id
    loadout.set_item(origin, "Item 5")
    loadout.apply(Refit(target_slot=target, origin_slot=origin))
    assert item_of(loadout, target) == "Item 5"
    assert item_of(loadout, origin) is None


def test_refit_from_unknown_origin_clears_target():
    loadout = Loadout()
    target = loadout.slots[1][1].id
    loadout.set_item(target, "Item 9")
    loadout.apply(Refit(target_slot=target, origin_slot=999))
    assert item_of(loadout, target) is None


def test_set_item_unknown_slot_is_ignored():
    loadout = Loadout()
    loadout.set_item(999, "Item 1")
    assert all(slot.item is None for _, slot in loadout.slots)


def test_unknown_command_raises():
    with pytest.raises(TypeError):
        Loadout().apply("fit everything")