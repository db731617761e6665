"""
Slot names, slot families and slot descriptors.

Slots are identified by their Loadout journal names, e.g. ``PowerPlant``,
``Slot04_Size3``, ``Military01``, ``MediumHardpoint2`` or ``TinyHardpoint1``.

A slot descriptor selects slots by name. Three shapes exist:

- ``ExactSlot``: the slot name must be equal to the given name.
- ``SlotPattern``: a regular expression that must match somewhere in the
  slot name.
- ``AnyOfSlots``: any one of a list of descriptors must match.

Public entity methods accept plain strings, compiled patterns and lists as
well; they are turned into descriptors by :func:`as_slot_descriptor`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union


# =============================================================================
# SLOT FAMILIES
# =============================================================================

REG_INTERNAL_SLOT = re.compile(r"Slot\d{2}_Size\d", re.IGNORECASE)
REG_MILITARY_SLOT = re.compile(r"Military\d{2}", re.IGNORECASE)
REG_HARDPOINT_SLOT = re.compile(r"(Small|Medium|Large|Huge)Hardpoint", re.IGNORECASE)
REG_UTILITY_SLOT = re.compile(r"TinyHardpoint", re.IGNORECASE)

# Core slots in the order returned by Ship.get_core_modules(), each mapped to
# the pattern an item must match to be placed on it.
CORE_SLOTS: dict[str, re.Pattern] = {
    "Armour": re.compile(r"_armour_", re.IGNORECASE),
    "PowerPlant": re.compile(r"^int_powerplant_", re.IGNORECASE),
    "MainEngines": re.compile(r"^int_engine_", re.IGNORECASE),
    "FrameShiftDrive": re.compile(r"^int_hyperdrive_", re.IGNORECASE),
    "LifeSupport": re.compile(r"^int_lifesupport_", re.IGNORECASE),
    "PowerDistributor": re.compile(r"^int_powerdistributor_", re.IGNORECASE),
    "Radar": re.compile(r"^int_sensors_", re.IGNORECASE),
    "FuelTank": re.compile(r"^int_fueltank_", re.IGNORECASE),
}

INTERNAL = "internal"
MILITARY = "military"
HARDPOINT = "hardpoint"
UTILITY = "utility"


def slot_family(slot: str) -> Optional[str]:
    """
    Classify a slot name.

    Args:
        slot: Slot name.

    Returns:
        The core slot name itself for core slots, one of ``internal``,
        ``military``, ``hardpoint`` or ``utility`` otherwise, or None for
        names that belong to no known family.
    """
    if slot in CORE_SLOTS:
        return slot
    if REG_INTERNAL_SLOT.search(slot):
        return INTERNAL
    if REG_MILITARY_SLOT.search(slot):
        return MILITARY
    if REG_UTILITY_SLOT.search(slot):
        return UTILITY
    if REG_HARDPOINT_SLOT.search(slot):
        return HARDPOINT
    return None


def core_slot_for_item(item: str) -> Optional[str]:
    """Return the core slot an item belongs on, or None for non-core items."""
    for slot, pattern in CORE_SLOTS.items():
        if pattern.search(item):
            return slot
    return None


# =============================================================================
# SLOT DESCRIPTORS
# =============================================================================

@dataclass(frozen=True)
class ExactSlot:
    """Matches exactly one slot name."""
    name: str

    def matches(self, slot: str) -> bool:
        return slot == self.name


@dataclass(frozen=True)
class SlotPattern:
    """Matches every slot name the pattern can be found in."""
    pattern: re.Pattern

    def matches(self, slot: str) -> bool:
        return self.pattern.search(slot) is not None


@dataclass(frozen=True)
class AnyOfSlots:
    """Matches if any of the contained descriptors matches."""
    options: tuple[SlotDescriptor, ...]

    def matches(self, slot: str) -> bool:
        return any(option.matches(slot) for option in self.options)


SlotDescriptor = Union[ExactSlot, SlotPattern, AnyOfSlots]

# Anything the public API accepts where a slot is expected
SlotLike = Union[str, re.Pattern, SlotDescriptor, list, tuple]


def as_slot_descriptor(slot: SlotLike) -> SlotDescriptor:
    """
    Convert a slot-like value into a descriptor.

    Args:
        slot: Slot name, compiled pattern, descriptor, or a list/tuple of
            any of these.

    Returns:
        The matching descriptor.

    Raises:
        TypeError: If the value is none of the accepted shapes.
    """
    if isinstance(slot, (ExactSlot, SlotPattern, AnyOfSlots)):
        return slot
    if isinstance(slot, str):
        return ExactSlot(slot)
    if isinstance(slot, re.Pattern):
        return SlotPattern(slot)
    if isinstance(slot, (list, tuple)):
        return AnyOfSlots(tuple(as_slot_descriptor(s) for s in slot))
    raise TypeError(f"Not a slot descriptor: {slot!r}")
