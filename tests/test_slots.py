"""
Unit tests for slot families and slot descriptors.

Run with: python -m pytest tests/test_slots.py -v
"""

import re

import pytest

from edforge.slots import (
    CORE_SLOTS,
    AnyOfSlots,
    ExactSlot,
    SlotPattern,
    as_slot_descriptor,
    core_slot_for_item,
    slot_family,
)


class TestSlotFamily:
    """Tests for slot classification."""

    @pytest.mark.parametrize("slot", list(CORE_SLOTS))
    def test_core_slots(self, slot):
        """Core slots are their own family."""
        assert slot_family(slot) == slot

    @pytest.mark.parametrize("slot,family", [
        ("Slot01_Size2", "internal"),
        ("Slot10_Size8", "internal"),
        ("Military01", "military"),
        ("SmallHardpoint1", "hardpoint"),
        ("HugeHardpoint2", "hardpoint"),
        ("TinyHardpoint3", "utility"),
    ])
    def test_families(self, slot, family):
        """Numbered slots are classified by name."""
        assert slot_family(slot) == family

    def test_unknown_slot(self):
        """Unknown slot names have no family."""
        assert slot_family("PaintJob") is None

    def test_core_order(self):
        """Core slots are listed in core module accessor order."""
        assert list(CORE_SLOTS) == [
            "Armour", "PowerPlant", "MainEngines", "FrameShiftDrive",
            "LifeSupport", "PowerDistributor", "Radar", "FuelTank",
        ]


class TestCoreSlotForItem:
    """Tests for mapping items to core slots."""

    @pytest.mark.parametrize("item,slot", [
        ("sidewinder_armour_grade1", "Armour"),
        ("int_powerplant_size2_class5", "PowerPlant"),
        ("int_engine_size3_class1", "MainEngines"),
        ("int_hyperdrive_size5_class1", "FrameShiftDrive"),
        ("int_lifesupport_size1_class1", "LifeSupport"),
        ("int_powerdistributor_size6_class1", "PowerDistributor"),
        ("int_sensors_size4_class1", "Radar"),
        ("int_fueltank_size1_class3", "FuelTank"),
    ])
    def test_core_items(self, item, slot):
        """Core items map to their core slot."""
        assert core_slot_for_item(item) == slot

    def test_non_core_items(self):
        """Other items have no core slot."""
        assert core_slot_for_item("hpt_pulselaser_fixed_small") is None
        assert core_slot_for_item("int_cargorack_size2_class1") is None
        assert core_slot_for_item("") is None


class TestSlotDescriptors:
    """Tests for descriptor matching and coercion."""

    def test_exact(self):
        """Exact descriptors compare whole names."""
        assert ExactSlot("Slot04_Size3").matches("Slot04_Size3")
        assert not ExactSlot("Slot04").matches("Slot04_Size3")

    def test_pattern(self):
        """Patterns match anywhere in the slot name."""
        assert SlotPattern(re.compile("Slot0")).matches("Slot04_Size3")
        assert SlotPattern(re.compile("Size3")).matches("Slot04_Size3")
        assert not SlotPattern(re.compile("^Size3")).matches("Slot04_Size3")

    def test_any_of(self):
        """Any-of descriptors match if one member matches."""
        descriptor = AnyOfSlots((ExactSlot("Armour"), SlotPattern(re.compile("Hardpoint"))))
        assert descriptor.matches("Armour")
        assert descriptor.matches("SmallHardpoint1")
        assert not descriptor.matches("PowerPlant")

    def test_empty_any_of(self):
        """An empty any-of matches nothing."""
        assert not AnyOfSlots(()).matches("Armour")

    def test_coercion(self):
        """Names and patterns become descriptors."""
        assert as_slot_descriptor("Armour") == ExactSlot("Armour")
        pattern = re.compile("Military")
        assert as_slot_descriptor(pattern) == SlotPattern(pattern)

    def test_nested_list_coercion(self):
        """Nested lists become nested any-of descriptors."""
        pattern = re.compile("Tiny")
        descriptor = as_slot_descriptor(["Armour", [pattern]])
        assert descriptor == AnyOfSlots((ExactSlot("Armour"), AnyOfSlots((SlotPattern(pattern),))))
        assert descriptor.matches("TinyHardpoint1")

    def test_descriptor_passes_through(self):
        """Descriptors are passed through unchanged."""
        descriptor = ExactSlot("Radar")
        assert as_slot_descriptor(descriptor) is descriptor

    def test_invalid_descriptor(self):
        """Unsupported types raise TypeError."""
        with pytest.raises(TypeError):
            as_slot_descriptor(42)
