"""
Structural validation of raw ship and module records.

The records follow the layout of the in-game Loadout journal event. Fields
not described here are allowed and are carried along untouched, so a
validated record round-trips through the entities unchanged.

This module also holds the tables of protected properties: fields that are
required on a valid build and therefore may only be changed through the
dedicated entity methods, never through the generic ``write`` path.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

logger = logging.getLogger(__name__)

# Numbers without coercion from str or bool
Number = Union[StrictInt, StrictFloat]


# =============================================================================
# PROTECTED PROPERTIES
# =============================================================================

# Slot is write-once (Module.set_slot), Item changes through Module.update and
# Engineering through Module.set_blueprint / Module.set.
MODULE_PROTECTED_PROPERTIES: frozenset[str] = frozenset({"Slot", "Item", "Engineering"})

# ShipName and ShipIdent have setters but are not protected.
SHIP_PROTECTED_PROPERTIES: frozenset[str] = frozenset({"Ship", "Modules"})


def module_var_is_specified(prop: str) -> bool:
    """Check whether a module property is protected from generic writes."""
    return prop in MODULE_PROTECTED_PROPERTIES


def ship_var_is_specified(prop: str) -> bool:
    """Check whether a ship property is protected from generic writes."""
    return prop in SHIP_PROTECTED_PROPERTIES


# =============================================================================
# RECORD MODELS
# =============================================================================

class ModifierRecord(BaseModel):
    """A single engineered stat override."""
    model_config = ConfigDict(extra="allow")

    Label: StrictStr
    Value: Number


class BlueprintRecord(BaseModel):
    """Engineering block of a module."""
    model_config = ConfigDict(extra="allow")

    Engineer: StrictStr
    BlueprintName: StrictStr
    Level: StrictInt = Field(ge=1, le=5)
    Quality: Number
    Modifiers: list[ModifierRecord]
    ExperimentalEffect: Optional[StrictStr] = None

    @field_validator("Quality")
    @classmethod
    def _quality_range(cls, quality: float) -> float:
        if not 0 <= quality <= 1:
            raise ValueError("Quality must be between 0 and 1")
        return quality

    @field_validator("Modifiers")
    @classmethod
    def _unique_labels(cls, modifiers: list[ModifierRecord]) -> list[ModifierRecord]:
        labels = [m.Label for m in modifiers]
        if len(labels) != len(set(labels)):
            raise ValueError("Modifier labels must be unique")
        return modifiers


class ModuleRecord(BaseModel):
    """Raw module record as stored inside a build."""
    model_config = ConfigDict(extra="allow")

    Slot: StrictStr
    On: StrictBool
    Item: StrictStr
    Priority: StrictInt = Field(ge=0)
    Engineering: Optional[BlueprintRecord] = None


class ShipRecord(BaseModel):
    """Raw ship build record."""
    model_config = ConfigDict(extra="allow")

    Ship: StrictStr = Field(min_length=1)
    ShipName: StrictStr
    ShipIdent: StrictStr
    Modules: list[ModuleRecord]

    @field_validator("Modules")
    @classmethod
    def _unique_slots(cls, modules: list[ModuleRecord]) -> list[ModuleRecord]:
        slots = [m.Slot for m in modules if m.Slot]
        if len(slots) != len(set(slots)):
            raise ValueError("A slot can hold at most one module")
        return modules


# =============================================================================
# VALIDATION ENTRY POINTS
# =============================================================================

def _validate(model: type[BaseModel], obj: Any) -> bool:
    if not isinstance(obj, dict):
        logger.debug("Rejected %s: not an object (%s)", model.__name__, type(obj).__name__)
        return False
    try:
        model.model_validate(obj)
    except ValidationError as e:
        logger.debug("Rejected %s: %s", model.__name__, e)
        return False
    return True


def validate_module_json(obj: Any) -> bool:
    """
    Check whether an object is a structurally valid module record.

    Args:
        obj: Candidate record.

    Returns:
        True if the record is valid. The record itself is not modified.
    """
    return _validate(ModuleRecord, obj)


def validate_ship_json(obj: Any) -> bool:
    """
    Check whether an object is a structurally valid ship build.

    Args:
        obj: Candidate record.

    Returns:
        True if the build and all of its module records are valid.
    """
    return _validate(ShipRecord, obj)
