"""
Module entity for ship builds.

A :class:`Module` wraps one raw module record (Loadout journal layout)::

    {"Slot": "Slot01_Size2", "On": true, "Item": "int_cargorack_size2_class1",
     "Priority": 1, "Engineering": {...}}

The record is owned exclusively by the entity: it is deep-copied on the way
in and on the way out. Fields that identify the module (``Slot``, ``Item``,
``Engineering``) can only be changed through dedicated methods; everything
else is reachable through :meth:`Module.read` and :meth:`Module.write`.

Engineering modifiers override the static base values of an item. Reading a
property with :meth:`Module.get` returns the engineered value when one exists
and the base value from the reference data otherwise.
"""

from __future__ import annotations

import copy
import logging
import weakref
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from .compression import compress, decompress
from .errors import IllegalStateError, ImportExportError
from .reference import get_class, get_module_property, get_rating, get_slot_size, item_fits_slot
from .slots import SlotLike, as_slot_descriptor
from .validation import module_var_is_specified, validate_module_json

if TYPE_CHECKING:
    from .ship import Ship

logger = logging.getLogger(__name__)

ModuleLike = Union["Module", str, Mapping]

EMPTY_MODULE: dict[str, Any] = {
    "Slot": "",
    "On": False,
    "Item": "",
    "Priority": 0,
}


def clone_module_to_json(module: ModuleLike) -> dict:
    """
    Turn a module-like value into an independent, validated module record.

    Args:
        module: Another Module, a compact module code or a raw record.

    Returns:
        A deep copy of the module record.

    Raises:
        ImportExportError: If the input can't be decoded or is not a valid
            module record.
    """
    if isinstance(module, Module):
        return module.to_json()

    if isinstance(module, str):
        module = decompress(module)
    if not isinstance(module, Mapping):
        raise ImportExportError(f"Can't build a module from {type(module).__name__}")

    record = copy.deepcopy(dict(module))
    if not validate_module_json(record):
        raise ImportExportError("Module is not valid")
    return record


class Module:
    """
    A module that belongs to a :class:`~edforge.ship.Ship`.

    Args:
        build_from: Module-like input; if None an empty placeholder is
            created.
        ship: Optional owning ship. The back-reference is weak and can be
            set only once.

    Raises:
        ImportExportError: If ``build_from`` is not a valid module.
    """

    def __init__(self, build_from: Optional[ModuleLike] = None, ship: Optional[Ship] = None):
        self._object: dict = {}
        self._ship_ref: Optional[weakref.ref] = None

        if build_from is None:
            self.clear()
        else:
            self._object = clone_module_to_json(build_from)

        if ship is not None:
            self.set_ship(ship)

    def __repr__(self) -> str:
        return f"Module(Slot={self.slot!r}, Item={self.item!r})"

    @property
    def slot(self) -> str:
        """Name of the slot this module is assigned to; empty if unassigned."""
        return self._object.get("Slot", "")

    @property
    def item(self) -> str:
        """Name of the mounted item; empty for placeholders."""
        return self._object.get("Item", "")

    # =========================================================================
    # RECORD ACCESS
    # =========================================================================

    def clear(self) -> None:
        """Turn this module into an empty placeholder, keeping its slot."""
        self._object = dict(EMPTY_MODULE, Slot=self.slot)

    def update(self, build_from: ModuleLike, keep: Optional[list[str]] = None) -> None:
        """
        Replace the wrapped record.

        An assigned slot always survives the update.

        Args:
            build_from: Module-like input to take the new record from.
            keep: Names of properties to carry over from the current record.

        Raises:
            ImportExportError: If ``build_from`` is not a valid module. The
                module is left unchanged in that case.
        """
        old = self._object
        new = clone_module_to_json(build_from)
        for prop in keep or ():
            if prop in old:
                new[prop] = copy.deepcopy(old[prop])
        if old.get("Slot"):
            new["Slot"] = old["Slot"]
        self._object = new

    def read(self, prop: str) -> Any:
        """Read a property of the raw record; None if it is not set."""
        return copy.deepcopy(self._object.get(prop))

    def write(self, prop: str, value: Any) -> None:
        """
        Write a property of the raw record.

        Raises:
            IllegalStateError: If the property is protected.
        """
        if module_var_is_specified(prop):
            raise IllegalStateError(f"Can't write protected property {prop}")
        self._object[prop] = copy.deepcopy(value)

    def to_json(self) -> dict:
        return copy.deepcopy(self._object)

    def compress(self) -> str:
        return compress(self._object)

    # =========================================================================
    # ENGINEERING
    # =========================================================================

    def _find_modifier(self, prop: str) -> Optional[dict]:
        engineering = self._object.get("Engineering")
        if not engineering:
            return None
        for modifier in engineering["Modifiers"]:
            if modifier["Label"] == prop:
                return modifier
        return None

    def get(self, prop: str, modified: bool = True) -> Optional[float]:
        """
        Get the value of a module property.

        Args:
            prop: Property name, e.g. ``mass``.
            modified: If True an engineered value takes precedence over the
                base value.

        Returns:
            The property value, or None if the item has no such property.
        """
        if modified:
            modifier = self._find_modifier(prop)
            if modifier is not None:
                return modifier["Value"]
        return get_module_property(self.item, prop)

    def set(self, prop: str, value: float) -> bool:
        """
        Override a property through the applied blueprint.

        Args:
            prop: Property name.
            value: New engineered value.

        Returns:
            True once the modifier has been stored.

        Raises:
            IllegalStateError: If no blueprint is applied.
            TypeError: If the value is not a number.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Value of {prop} must be a number, got {type(value).__name__}")
        if not self._object.get("Engineering"):
            raise IllegalStateError(f"Can't set property {prop} - no blueprint applied")

        modifier = self._find_modifier(prop)
        if modifier is not None:
            modifier["Value"] = value
        else:
            self._object["Engineering"]["Modifiers"].append({"Label": prop, "Value": value})
        return True

    def set_blueprint(
        self,
        name: str,
        grade: int = 1,
        progress: float = 0.0,
        engineer: str = "",
    ) -> None:
        """
        Apply a blueprint, replacing any previous engineering.

        Args:
            name: Blueprint name, e.g. ``Weapon_Overcharged``.
            grade: Blueprint grade from 1 to 5.
            progress: Progress within the grade from 0 to 1.
            engineer: Name of the engineer who applied the blueprint.

        Raises:
            IllegalStateError: If the module is empty.
            ValueError: If grade or progress is out of range.
        """
        if self.is_empty():
            raise IllegalStateError(f"Can't apply blueprint {name} to an empty module")
        if not 1 <= grade <= 5:
            raise ValueError("Blueprint grade must be between 1 and 5")
        if not 0 <= progress <= 1:
            raise ValueError("Blueprint progress must be between 0 and 1")

        self._object["Engineering"] = {
            "Engineer": engineer,
            "BlueprintName": name,
            "Level": grade,
            "Quality": progress,
            "Modifiers": [],
        }

    def set_special(self, name: str) -> None:
        """
        Apply an experimental effect on top of the blueprint.

        Raises:
            IllegalStateError: If no blueprint is applied.
        """
        if not self._object.get("Engineering"):
            raise IllegalStateError(f"Can't apply special {name} - no blueprint applied")
        self._object["Engineering"]["ExperimentalEffect"] = name

    # =========================================================================
    # SLOTS
    # =========================================================================

    def is_on_slot(self, slot: SlotLike) -> Optional[bool]:
        """
        Check whether this module is on a matching slot.

        Args:
            slot: A slot name (exact match), a compiled pattern (must be
                found in the slot name) or a list of these (any must match).

        Returns:
            True or False for assigned modules; None if the module is not on
            any slot at all.
        """
        if not self.slot:
            return None
        return as_slot_descriptor(slot).matches(self.slot)

    def fits_slot_on(self, slot: str, ship: Union[str, Ship]) -> Optional[bool]:
        """
        Check whether this module's item fits a slot of a hull.

        Args:
            slot: Slot name.
            ship: Hull type or a ship whose hull is used.

        Returns:
            Whether the item fits; None for empty modules.
        """
        if not self.item:
            return None
        ship_type = ship if isinstance(ship, str) else ship.get_ship_type()
        return item_fits_slot(self.item, ship_type, slot)

    def set_slot(self, slot: str) -> bool:
        """
        Assign this module to a slot of its ship.

        A module carrying an item is only placed if the item fits the slot
        and the slot is not taken yet; otherwise the module stays unassigned.

        Args:
            slot: Slot name.

        Returns:
            True if the slot was assigned.

        Raises:
            IllegalStateError: If no ship has been set or a slot has already
                been assigned.
        """
        ship = self.get_ship()
        if ship is None:
            raise IllegalStateError(f"Can't assign slot to {slot} for unknown ship")
        if self.slot:
            raise IllegalStateError(f"Can't reassign slot to {slot}")

        if self.item and not item_fits_slot(self.item, ship.get_ship_type(), slot):
            logger.debug("%s does not fit %s on %s; left unassigned", self.item, slot, ship.get_ship_type())
            return False
        if ship.get_module(slot) is not None:
            logger.debug("Slot %s is already taken; left unassigned", slot)
            return False

        self._object["Slot"] = slot
        return True

    # =========================================================================
    # OWNERSHIP AND METADATA
    # =========================================================================

    def get_ship(self) -> Optional[Ship]:
        """Get the owning ship, if one has been set and is still alive."""
        if self._ship_ref is None:
            return None
        return self._ship_ref()

    def set_ship(self, ship: Ship) -> None:
        """
        Set the owning ship.

        Raises:
            IllegalStateError: If a ship has already been set.
        """
        if self._ship_ref is not None:
            raise IllegalStateError("Cannot reassign ship in Module")
        self._ship_ref = weakref.ref(ship)

    def is_empty(self) -> bool:
        return self.item == ""

    def is_assigned(self) -> bool:
        return self.slot != ""

    def get_class(self) -> Optional[int]:
        if not self.item:
            return None
        return get_class(self.item)

    def get_rating(self) -> Optional[str]:
        if not self.item:
            return None
        return get_rating(self.item)

    def get_size(self) -> Optional[int]:
        """Size of the slot this module is on; None if unassigned or shipless."""
        ship = self.get_ship()
        if ship is None or not self.slot:
            return None
        return get_slot_size(ship.get_ship_type(), self.slot)
