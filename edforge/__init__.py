"""Elite: Dangerous ship build entities."""

from .errors import (
    EdForgeError,
    IllegalStateError,
    ImportExportError,
)

from .compression import (
    compress,
    decompress,
)

from .module import (
    Module,
    ModuleLike,
)

from .ship import (
    # State types
    DistributorSetting,
    PowerDistributorState,
    ShipState,
    # Entity
    Ship,
)

from .slots import (
    # Descriptors
    AnyOfSlots,
    ExactSlot,
    SlotPattern,
    # Slot families
    CORE_SLOTS,
    REG_HARDPOINT_SLOT,
    REG_INTERNAL_SLOT,
    REG_MILITARY_SLOT,
    REG_UTILITY_SLOT,
)

from .validation import (
    validate_module_json,
    validate_ship_json,
)

__all__ = [
    # Errors
    "EdForgeError",
    "IllegalStateError",
    "ImportExportError",
    # Compression
    "compress",
    "decompress",
    # Module entity
    "Module",
    "ModuleLike",
    # Ship entity and state
    "DistributorSetting",
    "PowerDistributorState",
    "ShipState",
    "Ship",
    # Slots
    "AnyOfSlots",
    "ExactSlot",
    "SlotPattern",
    "CORE_SLOTS",
    "REG_HARDPOINT_SLOT",
    "REG_INTERNAL_SLOT",
    "REG_MILITARY_SLOT",
    "REG_UTILITY_SLOT",
    # Validation
    "validate_module_json",
    "validate_ship_json",
]
