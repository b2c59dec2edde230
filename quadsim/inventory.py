"""Equipment slots filled from an inventory by fitting commands."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that may hold one item."""

    id: int
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an item from the inventory into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Unfit | Fit | Refit


def _default_slots() -> list[tuple[str, Slot]]:
    return [(label, Slot(index)) for index, label in enumerate(DEFAULT_SLOT_LABELS)]


@dataclass
class Loadout:
    """Bought items and the labelled slots they can be fitted into."""

    inventory: list[str] = field(default_factory=list)
    slots: list[tuple[str, Slot]] = field(default_factory=_default_slots)

    def _find(self, slot_id: int) -> Slot | None:
        return next((slot for _, slot in self.slots if slot.id == slot_id), None)

    def buy(self, item: str) -> None:
        """Add an item to the inventory."""
        self.inventory.append(item)

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Set the slot's item; unknown slot ids are ignored."""
        slot = self._find(slot_id)
        if slot is not None:
            slot.item = item

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self._find(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"unknown fitting command: {command!r}")