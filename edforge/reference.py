"""
Static reference data for ships and items.

The data is a JSON document with two tables:

- ``ships``: hull type -> name, manufacturer, size class and a map of every
  slot the hull has to the slot's size.
- ``items``: item name -> class, rating, group, the slot families the item
  can be mounted in and its base properties.

By default the document bundled with the package is used. Setting the
``EDFORGE_REFERENCE_DATA`` environment variable points the lookups to a
different file of the same shape.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .slots import slot_family

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_PATH = Path(__file__).parent / "data" / "reference.json"
REFERENCE_PATH_ENV = "EDFORGE_REFERENCE_DATA"


# =============================================================================
# LOADING
# =============================================================================

def load_reference_data(filepath: str | Path) -> dict:
    """
    Load reference data from a JSON file.

    Args:
        filepath: Path to the reference JSON file.

    Returns:
        Dictionary with ``ships`` and ``items`` tables.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(filepath, "r") as f:
        data = json.load(f)
    data.setdefault("ships", {})
    data.setdefault("items", {})
    return data


def _reference_path() -> Path:
    override = os.environ.get(REFERENCE_PATH_ENV)
    if not override:
        return DEFAULT_REFERENCE_PATH
    path = Path(override)
    if not path.is_file():
        logger.warning(
            "%s=%s does not exist; using bundled reference data", REFERENCE_PATH_ENV, override
        )
        return DEFAULT_REFERENCE_PATH
    return path


@lru_cache(maxsize=1)
def get_reference_data() -> dict:
    """Get the active reference data, loading it on first use."""
    path = _reference_path()
    logger.debug("Loading reference data from %s", path)
    return load_reference_data(path)


def clear_reference_cache() -> None:
    """Forget loaded reference data so the next lookup reloads it."""
    get_reference_data.cache_clear()


def _item(item: str) -> Optional[dict]:
    return get_reference_data()["items"].get(item)


def _ship(ship_type: str) -> Optional[dict]:
    return get_reference_data()["ships"].get(ship_type)


# =============================================================================
# LOOKUPS
# =============================================================================

def get_ship_info(ship_type: str) -> dict:
    """
    Get the reference entry of a hull.

    Raises:
        KeyError: If the ship type is not found in the reference data.
    """
    ship = _ship(ship_type)
    if ship is None:
        raise KeyError(f"Ship type '{ship_type}' not found in reference data")
    return copy.deepcopy(ship)


def get_module_property(item: str, prop: str) -> Optional[float]:
    """
    Get the base value of an item property.

    Args:
        item: Item name, e.g. ``int_powerplant_size2_class1``.
        prop: Property name, e.g. ``powercapacity``.

    Returns:
        The unmodified value, or None if the item or property is unknown.
    """
    info = _item(item)
    if info is None:
        return None
    return info.get("props", {}).get(prop)


def get_class(item: str) -> Optional[int]:
    info = _item(item)
    return None if info is None else info.get("class")


def get_rating(item: str) -> Optional[str]:
    info = _item(item)
    return None if info is None else info.get("rating")


def get_slot_size(ship_type: str, slot: str) -> Optional[int]:
    """Size of a slot on a hull; None if the hull or slot is unknown."""
    ship = _ship(ship_type)
    if ship is None:
        return None
    return ship.get("slots", {}).get(slot)


def item_fits_slot(item: str, ship_type: str, slot: str) -> bool:
    """
    Check whether an item can be mounted in a slot of a hull.

    An item fits when the slot exists on the hull, the slot's family is one
    the item can be mounted in and the item's class does not exceed the slot
    size. Armour additionally has to be made for that hull.

    Args:
        item: Item name.
        ship_type: Hull type, e.g. ``sidewinder``.
        slot: Slot name, e.g. ``Slot01_Size2``.

    Returns:
        True if the item fits; False for any unknown item, hull or slot.
    """
    info = _item(item)
    size = get_slot_size(ship_type, slot)
    if info is None or size is None:
        return False

    family = slot_family(slot)
    if family is None or family not in info.get("fits", []):
        return False
    if family == "Armour":
        return item.lower().startswith(f"{ship_type.lower()}_armour_")
    return info.get("class", 0) <= size
