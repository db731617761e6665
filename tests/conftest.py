"""Shared build fixtures for the entity tests."""

import pytest

from edforge.ship import Ship


@pytest.fixture
def fsd_record() -> dict:
    """An engineered frame shift drive."""
    return {
        "Slot": "FrameShiftDrive",
        "On": True,
        "Item": "int_hyperdrive_size2_class1",
        "Priority": 0,
        "Engineering": {
            "Engineer": "Felicity Farseer",
            "BlueprintName": "FSD_LongRange",
            "Level": 1,
            "Quality": 0.5,
            "Modifiers": [
                {"Label": "optmass", "Value": 52.8},
                {"Label": "mass", "Value": 2.75},
            ],
        },
    }


@pytest.fixture
def cargo_record() -> dict:
    """An unassigned size 1 cargo rack."""
    return {
        "Slot": "",
        "On": True,
        "Item": "int_cargorack_size1_class1",
        "Priority": 1,
    }


@pytest.fixture
def sidewinder_build(fsd_record) -> dict:
    """A complete sidewinder build; modules deliberately not in slot order."""
    return {
        "Ship": "sidewinder",
        "ShipName": "Dust Devil",
        "ShipIdent": "DD-01",
        "HullValue": 4500,
        "Modules": [
            {"Slot": "Armour", "On": True, "Item": "sidewinder_armour_grade1", "Priority": 1},
            {"Slot": "PowerPlant", "On": True, "Item": "int_powerplant_size2_class1", "Priority": 1},
            {"Slot": "MainEngines", "On": True, "Item": "int_engine_size2_class1", "Priority": 0},
            fsd_record,
            {"Slot": "LifeSupport", "On": True, "Item": "int_lifesupport_size1_class1", "Priority": 0},
            {"Slot": "PowerDistributor", "On": True, "Item": "int_powerdistributor_size1_class1", "Priority": 0},
            {"Slot": "Radar", "On": True, "Item": "int_sensors_size1_class1", "Priority": 0},
            {"Slot": "FuelTank", "On": True, "Item": "int_fueltank_size1_class3", "Priority": 1},
            {"Slot": "SmallHardpoint2", "On": True, "Item": "hpt_pulselaser_fixed_small", "Priority": 0},
            {"Slot": "SmallHardpoint1", "On": True, "Item": "hpt_multicannon_gimbal_small", "Priority": 0},
            {"Slot": "TinyHardpoint2", "On": False, "Item": "", "Priority": 0},
            {"Slot": "TinyHardpoint1", "On": True, "Item": "hpt_heatsinklauncher_turret_tiny", "Priority": 0},
            {"Slot": "Slot02_Size2", "On": True, "Item": "int_cargorack_size2_class1", "Priority": 1},
            {"Slot": "Slot01_Size2", "On": True, "Item": "int_shieldgenerator_size2_class1", "Priority": 0},
            {"Slot": "Slot03_Size1", "On": False, "Item": "", "Priority": 0},
        ],
    }


@pytest.fixture
def dropship_build() -> dict:
    """A federal dropship build with military slots."""
    return {
        "Ship": "federation_dropship",
        "ShipName": "Iron Hand",
        "ShipIdent": "IH-07",
        "Modules": [
            {"Slot": "Armour", "On": True, "Item": "federation_dropship_armour_grade1", "Priority": 1},
            {"Slot": "PowerPlant", "On": True, "Item": "int_powerplant_size6_class1", "Priority": 1},
            {"Slot": "MainEngines", "On": True, "Item": "int_engine_size6_class1", "Priority": 0},
            {"Slot": "FrameShiftDrive", "On": True, "Item": "int_hyperdrive_size5_class1", "Priority": 0},
            {"Slot": "LifeSupport", "On": True, "Item": "int_lifesupport_size5_class1", "Priority": 0},
            {"Slot": "PowerDistributor", "On": True, "Item": "int_powerdistributor_size6_class1", "Priority": 0},
            {"Slot": "Radar", "On": True, "Item": "int_sensors_size4_class1", "Priority": 0},
            {"Slot": "FuelTank", "On": True, "Item": "int_fueltank_size4_class3", "Priority": 1},
            {"Slot": "Military02", "On": True, "Item": "int_hullreinforcement_size1_class1", "Priority": 0},
            {"Slot": "Slot02_Size5", "On": True, "Item": "int_cargorack_size2_class1", "Priority": 0},
            {"Slot": "Military01", "On": False, "Item": "", "Priority": 0},
            {"Slot": "Slot01_Size6", "On": False, "Item": "", "Priority": 0},
            {"Slot": "Slot04_Size4", "On": True, "Item": "int_fueltank_size2_class3", "Priority": 0},
            {"Slot": "MediumHardpoint1", "On": True, "Item": "hpt_pulselaser_fixed_medium", "Priority": 0},
            {"Slot": "LargeHardpoint1", "On": True, "Item": "hpt_beamlaser_fixed_large", "Priority": 0},
            {"Slot": "TinyHardpoint1", "On": True, "Item": "hpt_shieldbooster_size0_class1", "Priority": 0},
        ],
    }


@pytest.fixture
def sidewinder(sidewinder_build) -> Ship:
    return Ship(sidewinder_build)


@pytest.fixture
def dropship(dropship_build) -> Ship:
    return Ship(dropship_build)
