"""
Ship entity for Elite: Dangerous ship builds.

A :class:`Ship` wraps a raw build record::

    {"Ship": "sidewinder", "ShipName": "...", "ShipIdent": "...",
     "Modules": [<module record>, ...]}

Every raw module record is replaced by a :class:`~edforge.module.Module`
owned by the ship. Modules are kept in construction order; accessors that
return groups of modules (internals, hardpoints, utilities) sort by slot name
so that their positional indices are stable.

Besides the persisted build, each ship carries runtime state (power
distributor pips, cargo and fuel) that is not part of the build record.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .compression import compress, decompress
from .errors import IllegalStateError, ImportExportError
from .module import Module, ModuleLike
from .slots import (
    REG_HARDPOINT_SLOT,
    REG_INTERNAL_SLOT,
    REG_MILITARY_SLOT,
    REG_UTILITY_SLOT,
    SlotLike,
    as_slot_descriptor,
    core_slot_for_item,
)
from .validation import ship_var_is_specified, validate_ship_json

logger = logging.getLogger(__name__)

# Slot names or integer positions within a category accessor
NumberedSlot = Union[SlotLike, int]
ItemType = Union[str, re.Pattern, None]

# Slot families of each category, in the order they are returned
INTERNAL_FAMILIES = (REG_INTERNAL_SLOT, REG_MILITARY_SLOT)
HARDPOINT_FAMILIES = (REG_HARDPOINT_SLOT,)
UTILITY_FAMILIES = (REG_UTILITY_SLOT,)


# =============================================================================
# RUNTIME STATE
# =============================================================================

@dataclass
class DistributorSetting:
    """
    Pips assigned to one power distributor capacitor.

    Attributes:
        base: Pips set by the pilot (0 to 4, in halves).
        mc: Additional pips granted by multi-crew.
    """
    base: float = 2
    mc: float = 0


@dataclass
class PowerDistributorState:
    """Pip settings for systems, engines and weapons."""
    sys: DistributorSetting = field(default_factory=DistributorSetting)
    eng: DistributorSetting = field(default_factory=DistributorSetting)
    wep: DistributorSetting = field(default_factory=DistributorSetting)


@dataclass
class ShipState:
    """
    Runtime state of a ship that is not part of its build.

    Attributes:
        power_distributor: Current pip settings.
        cargo: Cargo carried in tons.
        fuel: Fuel level as a fraction of capacity (1 = full).
    """
    power_distributor: PowerDistributorState = field(default_factory=PowerDistributorState)
    cargo: float = 0
    fuel: float = 1

    def to_dict(self) -> dict:
        pd = self.power_distributor
        return {
            "PowerDistributor": {
                "Sys": {"base": pd.sys.base, "mc": pd.sys.mc},
                "Eng": {"base": pd.eng.base, "mc": pd.eng.mc},
                "Wep": {"base": pd.wep.base, "mc": pd.wep.mc},
            },
            "Cargo": self.cargo,
            "Fuel": self.fuel,
        }


# =============================================================================
# SHIP
# =============================================================================

class Ship:
    """
    An Elite: Dangerous ship build.

    Args:
        build_from: Compact build code or raw build record.

    Raises:
        ImportExportError: If the build can't be decoded or is not valid.
    """

    def __init__(self, build_from: Union[str, dict]):
        self.state = ShipState()

        if isinstance(build_from, str):
            build_from = decompress(build_from)
        if not validate_ship_json(build_from):
            raise ImportExportError("Ship build is not valid")

        self._object: dict = copy.deepcopy(build_from)
        self._object["Modules"] = [Module(record, self) for record in self._object["Modules"]]
        logger.debug("Built %s with %d modules", self.get_ship_type(), len(self._object["Modules"]))

    def __repr__(self) -> str:
        return f"Ship(Ship={self.get_ship_type()!r}, ShipName={self.get_ship_name()!r})"

    # =========================================================================
    # RECORD ACCESS
    # =========================================================================

    def read(self, prop: str) -> Any:
        """
        Read a property of the build record.

        ``Modules`` yields a new list of the ship's module entities; every
        other property is returned as a copy.
        """
        if prop == "Modules":
            return list(self._object["Modules"])
        return copy.deepcopy(self._object.get(prop))

    def write(self, prop: str, value: Any) -> None:
        """
        Write a property of the build record.

        Fields that are required on valid builds are protected and can only
        be changed through their methods, e.g. modules through
        :meth:`set_module`.

        Raises:
            IllegalStateError: If the property is protected.
        """
        if ship_var_is_specified(prop):
            raise IllegalStateError(f"Can't write protected property {prop}")
        self._object[prop] = copy.deepcopy(value)

    def get_ship_type(self) -> str:
        return self._object["Ship"]

    def get_ship_name(self) -> str:
        return self._object["ShipName"]

    def set_ship_name(self, name: str) -> None:
        self._object["ShipName"] = name

    def get_ship_id(self) -> str:
        return self._object["ShipIdent"]

    def set_ship_id(self, ident: str) -> None:
        self._object["ShipIdent"] = ident

    def to_json(self) -> dict:
        """Get an independent copy of the build record."""
        return {
            key: [m.to_json() for m in value] if key == "Modules" else copy.deepcopy(value)
            for key, value in self._object.items()
        }

    def compress(self) -> str:
        return compress(self.to_json())

    # =========================================================================
    # MODULE LOOKUP
    # =========================================================================

    def get_module(self, slot: SlotLike) -> Optional[Module]:
        """
        Get the first module on a matching slot.

        Args:
            slot: Slot name, pattern or list of these; see
                :meth:`Module.is_on_slot`.

        Returns:
            The first matching module in construction order, or None.
        """
        descriptor = as_slot_descriptor(slot)
        for module in self._object["Modules"]:
            if module.is_on_slot(descriptor):
                return module
        return None

    def get_modules(
        self,
        slots: Optional[SlotLike] = None,
        item_type: ItemType = None,
        include_empty: bool = False,
        sort: bool = False,
    ) -> list[Module]:
        """
        Get all modules on matching slots.

        Args:
            slots: Slot name, pattern or list of these. None selects every
                module.
            item_type: Pattern the module's item has to contain.
            include_empty: Also return empty placeholders.
            sort: Sort the result by slot name.

        Returns:
            Matching modules without duplicates. Possibly empty.
        """
        modules = self._object["Modules"]
        if slots is not None:
            descriptor = as_slot_descriptor(slots)
            modules = [m for m in modules if m.is_on_slot(descriptor)]
        if item_type:
            modules = [m for m in modules if re.search(item_type, m.item)]
        if not include_empty:
            modules = [m for m in modules if not m.is_empty()]
        if sort:
            modules = sorted(modules, key=lambda m: m.slot)

        return list({id(m): m for m in modules}.values())

    def set_module(self, slot: Union[SlotLike, Module], module: ModuleLike) -> bool:
        """
        Put a copy of a module on the first matching slot.

        Only occupied slots (placeholders included) can be filled; new slots
        are never created.

        Args:
            slot: Slot to set the module on, or a module of this ship to
                replace in place.
            module: Module to copy.

        Returns:
            Whether an update took place.

        Raises:
            ImportExportError: If ``module`` is not a valid module.
        """
        if isinstance(slot, Module):
            if not any(m is slot for m in self._object["Modules"]):
                logger.debug("%r does not belong to %r", slot, self)
                return False
            slot.update(module, ["Slot"])
            return True

        old = self.get_module(slot)
        if old is None:
            logger.debug("No module on slot %r", slot)
            return False
        return self.set_module(old, module)

    # =========================================================================
    # CORE MODULES
    # =========================================================================

    def get_alloys(self) -> Optional[Module]:
        return self.get_module("Armour")

    def get_power_plant(self) -> Optional[Module]:
        return self.get_module("PowerPlant")

    def get_thrusters(self) -> Optional[Module]:
        return self.get_module("MainEngines")

    def get_fsd(self) -> Optional[Module]:
        """Get the frame shift drive."""
        return self.get_module("FrameShiftDrive")

    def get_life_support(self) -> Optional[Module]:
        return self.get_module("LifeSupport")

    def get_power_distributor(self) -> Optional[Module]:
        return self.get_module("PowerDistributor")

    def get_sensors(self) -> Optional[Module]:
        return self.get_module("Radar")

    def get_core_fuel_tank(self) -> Optional[Module]:
        return self.get_module("FuelTank")

    def get_core_modules(self) -> list[Optional[Module]]:
        """
        Get all eight core modules.

        Returns:
            Alloys, power plant, thrusters, FSD, life support, power
            distributor, sensors and fuel tank in that order; None for any
            missing one.
        """
        return [
            self.get_alloys(),
            self.get_power_plant(),
            self.get_thrusters(),
            self.get_fsd(),
            self.get_life_support(),
            self.get_power_distributor(),
            self.get_sensors(),
            self.get_core_fuel_tank(),
        ]

    def set_core_module(self, module: ModuleLike) -> bool:
        """
        Put a core module on the core slot its item belongs on.

        Returns:
            Whether an update took place; False for items that are no core
            module.
        """
        if not isinstance(module, Module):
            module = Module(module)
        slot = core_slot_for_item(module.item)
        if slot is None:
            logger.debug("%s is not a core module", module.item)
            return False
        return self.set_module(slot, module)

    def set_core_modules(self, modules: list[ModuleLike]) -> list[bool]:
        """Set several core modules; returns whether each one was set."""
        return [self.set_core_module(module) for module in modules]

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    def _category(self, families: tuple, item_type: ItemType, include_empty: bool) -> list[Module]:
        modules = []
        for family in families:
            modules.extend(self.get_modules(family, item_type, include_empty, sort=True))
        return modules

    def _resolve_numbered_slot(self, slot: NumberedSlot, families: tuple) -> SlotLike:
        # Indices address the category list with empty slots included, the
        # same list the read-side accessor returns.
        if isinstance(slot, bool) or not isinstance(slot, int):
            return slot
        modules = self._category(families, None, True)
        if not 0 <= slot < len(modules):
            raise IndexError(f"Slot index {slot} out of range (0-{len(modules) - 1})")
        return modules[slot].slot

    def get_internals(self, item_type: ItemType = None, include_empty: bool = False) -> list[Module]:
        """
        Get internal modules.

        Modules on normal internal slots come first, followed by modules on
        military slots. Each group is sorted by slot name.

        Args:
            item_type: Pattern the module's item has to contain.
            include_empty: Also return empty slots.

        Returns:
            Internal modules. Possibly empty.
        """
        return self._category(INTERNAL_FAMILIES, item_type, include_empty)

    def set_internal(self, slot: NumberedSlot, module: ModuleLike) -> bool:
        """
        Put a module on an internal slot.

        Args:
            slot: Slot descriptor, or a zero based index into
                ``get_internals(include_empty=True)``.
            module: Module to copy onto the slot.

        Returns:
            Whether an update took place.

        Raises:
            IndexError: If an index is out of range.
        """
        return self.set_module(self._resolve_numbered_slot(slot, INTERNAL_FAMILIES), module)

    def get_hardpoints(self, item_type: ItemType = None, include_empty: bool = False) -> list[Module]:
        """Get hardpoint modules sorted by slot name."""
        return self._category(HARDPOINT_FAMILIES, item_type, include_empty)

    def set_hardpoint(self, slot: NumberedSlot, module: ModuleLike) -> bool:
        """Put a module on a hardpoint; indices work as in :meth:`set_internal`."""
        return self.set_module(self._resolve_numbered_slot(slot, HARDPOINT_FAMILIES), module)

    def get_utilities(self, item_type: ItemType = None, include_empty: bool = False) -> list[Module]:
        """Get utility modules sorted by slot name."""
        return self._category(UTILITY_FAMILIES, item_type, include_empty)

    def set_utility(self, slot: NumberedSlot, module: ModuleLike) -> bool:
        return self.set_module(self._resolve_numbered_slot(slot, UTILITY_FAMILIES), module)
