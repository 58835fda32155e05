"""Descriptions of the tables found in an engine map, per map variant."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import IntEnum


class TableKind(IntEnum):
    """Kinds of table that may appear in a map."""

    TORQUE_LIM_HIGH_RANGE = 100
    TORQUE_LIM_LOW_RANGE = 101
    DRIVER_DEMAND_LOW_RANGE = 102
    DRIVER_DEMAND_HIGH_RANGE = 103
    SMOKE_LIM_LOW_RANGE = 104
    SMOKE_LIM_HIGH_RANGE_A = 105
    SMOKE_LIM_HIGH_RANGE_B = 106
    FUEL_MAP_1 = 107
    FUEL_MAP_2 = 108
    FUEL_MAP_3 = 109
    FUEL_MAP_4 = 110
    IDLE_SPEED_1 = 111
    IDLE_SPEED_2 = 112
    EGR_MAP = 113
    FUEL_DENSITY_COMP_LOWER = 114
    FUEL_DENSITY_COMP_UPPER = 115
    COOLANT_TEMPERATURE = 116
    TIMINGS_MAP = 117
    TWG_DUTY_CYCLE = 118
    TWG_INTEGRAL_GAIN = 119
    TWG_PRESSURE_MAP = 120

    SCALAR_TWG_PWM_FREQUENCY = 200
    SCALAR_MAP_MAX_LIMIT = 201
    SCALAR_TURBO_MAX_LIMIT = 202
    SCALAR_TURBO_RECOVERY = 203

    UNKNOWN_MAP_1 = 900
    UNKNOWN_MAP_2 = 901
    UNKNOWN_MAP_3 = 902
    UNKNOWN_MAP_4 = 903
    UNKNOWN_MAP_5 = 904


UNUSED_INDEX = 255
"""Index given to tables that a variant does not have."""


@dataclass(frozen=True)
class TableInfoItem:
    """What is known about one table: its position in the map and its axes."""

    kind: int = 0
    index: int = 0
    x_unit: str = ""
    y_unit: str = ""
    z_unit: str = ""
    name: str = ""
    comment: str = ""


_K = TableKind

# Descriptions in catalogue order; the index is filled in per layout.
_TEMPLATES: tuple[TableInfoItem, ...] = (
    TableInfoItem(
        _K.TORQUE_LIM_HIGH_RANGE, 17, "RPM", "Inject Quantity mg/stroke", "",
        "TORQUE LIMITER HIGH RANGE",
        "Torque limiter table for HIGH range.\n\ndemand->smoke lim.->TORQUE LIM.->inj. duration\n\nX Axis: RPM\nY Axis: mg/stroke\n",
    ),
    TableInfoItem(
        _K.TORQUE_LIM_LOW_RANGE, 18, "RPM", "Inject Quantity mg/stroke", "",
        "TORQUE LIMITER LOW RANGE",
        "Torque limiter table for LOW range.\n\ndemand->smoke lim.->TORQUE LIM.->inj. duration\n\nX Axis: RPM\nY Axis: mg/stroke\n",
    ),
    TableInfoItem(
        _K.DRIVER_DEMAND_HIGH_RANGE, 69, "Throttle ref. %", "RPM", "Inject Quantity (mg/stroke)",
        "DRIVER DEMAND HIGH RANGE",
        "Driver demand table for HIGH range.\n\nDEMAND->smoke lim.->torque lim.->inj. duration\n\nX Axis: RPM\nY Axis: mg/stroke\nZ Axis: %",
    ),
    TableInfoItem(
        _K.DRIVER_DEMAND_LOW_RANGE, 70, "Throttle ref. %", "RPM", "Inject Quantity (mg/stroke)",
        "DRIVER DEMAND LOW RANGE",
        "Driver demand table for LOW range.\n\nDEMAND->smoke lim.->torque lim.->inj. duration\n\nX Axis: RPM\nY Axis: mg/stroke\nZ Axis: %",
    ),
    TableInfoItem(
        _K.SMOKE_LIM_LOW_RANGE, 0, "Airmass (mg/stroke)", "RPM", "Limited Inj. (mg/stroke)",
        "SMOKE LIMITER MAP LOW RANGE",
        "Smoke limiter map for low range.\n\ndemand->SMOKE LIM.->torque lim.->inj. duration\n\nX Axis: Airmass (mg/stroke)\nY Axis: RPM\nZ Axis: Limited Inj. (mg/stroke)",
    ),
    TableInfoItem(
        _K.SMOKE_LIM_HIGH_RANGE_A, 60, "Airmass (mg/stroke)", "RPM", "Limited Inj. (mg/stroke)",
        "SMOKE LIMITER MAP HIGH RANGE (normal load)",
        "Smoke limiter map for high range in normal load.\n\ndemand->SMOKE LIM.->torque lim.->inj. duration\n\nX Axis: Airmass (mg/stroke)\nY Axis: RPM\nZ Axis: Limited Inj. (mg/stroke)",
    ),
    TableInfoItem(
        _K.SMOKE_LIM_HIGH_RANGE_B, 0, "Airmass (mg/stroke)", "RPM", "Limited Inj. (mg/stroke)",
        "SMOKE LIMITER MAP HIGH RANGE (light load)",
        "Smoke limiter map for high range in light load.\n\ndemand->SMOKE LIM.->torque lim.->inj. duration\n\nX Axis: Airmass (mg/stroke)\nY Axis: RPM\nZ Axis: Limited Inj. (mg/stroke)",
    ),
    TableInfoItem(
        _K.FUEL_MAP_1, 0, "Requested IQ (mg/stroke)", "RPM", "microsec.",
        "FUEL MAP (0 deg. advance)",
        "Fuel map. Manages injection timing in function of engine speed and reference from throttle.\n\ndemand->smoke lim.->torque lim.->INJ. DURATION\n\nX Axis: Demand (mg/stroke)\nY Axis: RPMs\nZ Axis: Time (microsec.)",
    ),
    TableInfoItem(
        _K.FUEL_MAP_2, 0, "Requested IQ (mg/stroke)", "RPM", "microsec.",
        "FUEL MAP (5 deg. advance)",
        "Fuel map. Manages injection timing in function of engine speed and reference from throttle.\n\ndemand->smoke lim.->torque lim.->INJ. DURATION\n\nX Axis: Demand (mg/stroke)\nY Axis: RPMs\nZ Axis: Time (microsec.)",
    ),
    TableInfoItem(
        _K.FUEL_MAP_3, 0, "Requested IQ (mg/stroke)", "RPM", "microsec.",
        "FUEL MAP (10 deg. advance)",
        "Fuel map. Manages injection timing in function of engine speed and reference from throttle.\n\ndemand->smoke lim.->torque lim.->INJ. DURATION\n\nX Axis: Demand (mg/stroke)\nY Axis: RPMs\nZ Axis: Time (microsec.)",
    ),
    TableInfoItem(
        _K.FUEL_MAP_4, 0, "Requested IQ (mg/stroke)", "RPM", "microsec.",
        "FUEL MAP (25 deg. advance)",
        "Fuel map. Manages injection timing in function of engine speed and reference from throttle.\n\ndemand->smoke lim.->torque lim.->INJ. DURATION\n\nX Axis: Demand (mg/stroke)\nY Axis: RPMs\nZ Axis: Time (microsec.)",
    ),
    TableInfoItem(
        _K.FUEL_DENSITY_COMP_LOWER, 0, "?", "Fuel Temp", "Inject Quantity (mg/stroke)",
        "FUEL DENSITY COMPENSATION LOWER",
        "Fuel density compensation lower table\n\nX Axis: ?\nY Axis: Fuel temp.\nZ Axis: mg/stroke",
    ),
    TableInfoItem(
        _K.FUEL_DENSITY_COMP_UPPER, 0, "?", "Fuel Temp", "Inject Quantity (mg/stroke)",
        "FUEL DENSITY COMPENSATION UPPER",
        "Fuel density compensation upper table\n\nX Axis: ?\nY Axis: Fuel temp.\nZ Axis: mg/stroke",
    ),
    TableInfoItem(
        _K.IDLE_SPEED_1, 0, "Ambient Temp (deg.)", "RPM", "",
        "IDLE SPEED 1",
        "Idle speed map. Manages the idle speed. Both Idle Speed tables must be modified.\n\nX Axis: Ambient Temp.(deg.)\nY Axis: RPMs",
    ),
    TableInfoItem(
        _K.IDLE_SPEED_2, 0, "Ambient Temp (deg.)", "RPM", "",
        "IDLE SPEED 2",
        "Idle speed map. Manages the idle speed. Both Idle Speed tables must be modified.\n\nX Axis: Ambient Temp.(deg.)\nY Axis: RPMs",
    ),
    TableInfoItem(
        _K.EGR_MAP, 0, "RPM", "?", "?",
        "EGR MAP",
        "EGR map. Manages the EGR valve. To exclude it you must set all the values to 16000 (decimal).\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.COOLANT_TEMPERATURE, 0, "Sensor (mV)", "Battery (V)", "Temp (deg)",
        "COOLANT TEMPERATURE SENSOR",
        "Coolant temperature sensor table.\n\nX Axis: Temperature (Celsius deg.)\nY Axis: Battery (v)\nZ Axis: Sensor ref. (mV)",
    ),
    TableInfoItem(
        _K.TIMINGS_MAP, 0, "RPM", "Requested IQ (mg/stroke)", "Timing (deg)",
        "TIMINGS MAP",
        "Timings table.\n\nX Axis: RPM\nY Axis: mg/stroke\nZ Axis: deg",
    ),
    TableInfoItem(
        _K.UNKNOWN_MAP_1, 0, "?", "?", "?",
        "UNKNOWN MAP 1",
        "Unknown.\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.UNKNOWN_MAP_2, 0, "?", "?", "?",
        "UNKNOWN MAP 2",
        "Unknown.\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.UNKNOWN_MAP_3, 54, "?", "?", "",
        "UNKNOWN MAP 3",
        "Unknown (Increments improve response).\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.UNKNOWN_MAP_4, 0, "?", "?", "?",
        "UNKNOWN MAP 4",
        "Unknown.\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.UNKNOWN_MAP_5, 0, "?", "?", "?",
        "UNKNOWN MAP 5",
        "Unknown.\n\nX Axis: ?\nY Axis: ?\nZ Axis: ?",
    ),
    TableInfoItem(
        _K.TWG_DUTY_CYCLE, 0, "RPM", "Boost (kPa)", "Duty Cycle",
        "TWG DUTY CYCLE",
        "TWG Duty Cycle.\n\nX Axis: RPM\nY Axis: kPa\nZ Axis: D.C.",
    ),
    TableInfoItem(
        _K.TWG_INTEGRAL_GAIN, 0, "RPM", "RPM", "Integral Gain",
        "TWG INTEGRAL GAIN",
        "TWG Integral gain.\n\nX Axis: Boost\nY Axis: RPM\nZ Axis: I.G.",
    ),
    TableInfoItem(
        _K.TWG_PRESSURE_MAP, 0, "RPM", "Requested IQ (mg/stroke)", "Boost (kPa)",
        "TWG PRESSURE MAP",
        "Twg pressure table.\n\nX Axis: RPM\nY Axis: mg/stroke\nZ Axis: kPa",
    ),
    TableInfoItem(
        _K.SCALAR_TWG_PWM_FREQUENCY, 129, "", "", "",
        "TWG PWM FREQUENCY SCALER",
        "Frequency scaler (16=ENABLE/0=DISABLE)",
    ),
    TableInfoItem(
        _K.SCALAR_MAP_MAX_LIMIT, 145, "", "", "",
        "MAP MAX LIMIT",
        "MAP sensor scaler (max limit)",
    ),
    TableInfoItem(
        _K.SCALAR_TURBO_MAX_LIMIT, 133, "kPa", "", "",
        "TURBO OVERBOOST MAX",
        "Turbo overboost max pressure (kPa)",
    ),
    TableInfoItem(
        _K.SCALAR_TURBO_RECOVERY, 134, "kPa", "", "",
        "TURBO OVERBOOST RECOVERY",
        "Turbo overboost recovery pressure (kPa)",
    ),
)

_EU3_LAYOUT: dict[TableKind, int] = {
    _K.TORQUE_LIM_HIGH_RANGE: 17,
    _K.TORQUE_LIM_LOW_RANGE: 18,
    _K.UNKNOWN_MAP_3: 54,
    _K.SMOKE_LIM_HIGH_RANGE_A: 60,
    _K.SMOKE_LIM_HIGH_RANGE_B: 61,
    _K.DRIVER_DEMAND_HIGH_RANGE: 69,
    _K.DRIVER_DEMAND_LOW_RANGE: 70,
    _K.FUEL_DENSITY_COMP_LOWER: 96,
    _K.FUEL_DENSITY_COMP_UPPER: 97,
    _K.FUEL_MAP_1: 98,
    _K.FUEL_MAP_2: 99,
    _K.FUEL_MAP_3: 100,
    _K.FUEL_MAP_4: 101,
    _K.IDLE_SPEED_1: 40,
    _K.IDLE_SPEED_2: 41,
    _K.EGR_MAP: 73,
    _K.COOLANT_TEMPERATURE: 112,
    _K.UNKNOWN_MAP_1: 16,
    _K.UNKNOWN_MAP_2: 57,
    _K.SMOKE_LIM_LOW_RANGE: 59,
    _K.UNKNOWN_MAP_4: 90,
    _K.UNKNOWN_MAP_5: 94,
    _K.TIMINGS_MAP: 64,
    _K.TWG_DUTY_CYCLE: 110,
    _K.TWG_INTEGRAL_GAIN: 111,
    _K.TWG_PRESSURE_MAP: 115,
    _K.SCALAR_TWG_PWM_FREQUENCY: 129,
    _K.SCALAR_MAP_MAX_LIMIT: 145,
    _K.SCALAR_TURBO_MAX_LIMIT: 133,
    _K.SCALAR_TURBO_RECOVERY: 134,
}

_EU2_DISCOVERY_LAYOUT: dict[TableKind, int] = {
    **{kind: UNUSED_INDEX for kind in TableKind},
    _K.TORQUE_LIM_LOW_RANGE: 8,
    _K.SMOKE_LIM_HIGH_RANGE_A: 42,
    _K.DRIVER_DEMAND_HIGH_RANGE: 53,
    _K.DRIVER_DEMAND_LOW_RANGE: 54,
    _K.FUEL_DENSITY_COMP_LOWER: 62,
    _K.FUEL_DENSITY_COMP_UPPER: 63,
    _K.FUEL_MAP_1: 64,
    _K.FUEL_MAP_2: 65,
    _K.FUEL_MAP_3: 66,
    _K.IDLE_SPEED_1: 23,
    _K.IDLE_SPEED_2: 24,
    _K.EGR_MAP: 56,
    _K.COOLANT_TEMPERATURE: 75,
    _K.TWG_DUTY_CYCLE: 73,
    _K.TWG_INTEGRAL_GAIN: 74,
    _K.TWG_PRESSURE_MAP: 78,
}

_EU2_DEFENDER_LAYOUT: dict[TableKind, int] = {
    **{kind: UNUSED_INDEX for kind in TableKind},
    _K.TORQUE_LIM_LOW_RANGE: 9,
    _K.SMOKE_LIM_HIGH_RANGE_A: 41,
    _K.DRIVER_DEMAND_HIGH_RANGE: 52,
    _K.DRIVER_DEMAND_LOW_RANGE: 53,
    _K.FUEL_DENSITY_COMP_LOWER: 62,
    _K.FUEL_DENSITY_COMP_UPPER: 63,
    _K.FUEL_MAP_1: 63,
    _K.FUEL_MAP_2: 64,
    _K.FUEL_MAP_3: 65,
    _K.IDLE_SPEED_1: 24,
    _K.IDLE_SPEED_2: 26,
    _K.EGR_MAP: 55,
    _K.COOLANT_TEMPERATURE: 74,
    _K.TWG_DUTY_CYCLE: 72,
    _K.TWG_PRESSURE_MAP: 77,
}

# Unknown variants: every table is absent, except that the coolant table
# keeps its initial index of zero.
_DEFAULT_LAYOUT: dict[TableKind, int] = {
    **{kind: UNUSED_INDEX for kind in TableKind},
    _K.COOLANT_TEMPERATURE: 0,
}

_EU3_MAPS = frozenset({
    "svdxe003svtnp003", "svdxe004svtnp003", "svdxe006svtnp003",
    "svdxe008svtnp005", "svdxe008svtnp006", "svdxg003svtnp006",
    "svdxr002svtnp003", "svdxr005svtnp003", "svdxr007svtnp005",
    "svdxr007svtnp006", "svlne004svtnp003", "svlne006svtnp003",
    "svlne007svtnp005", "svlne007svtnp006", "svlnr002svtnp003",
    "svlnr004svtnp003", "svlnr005svtnp005", "svlnr005svtnp006",
    "svloe002svtnp003", "svloe004svtnp003", "svloe005svtnp005",
    "svloe005svtnp006", "svloj002svtnp003", "svloj002svtnp006",
    "svlor002svtnp003", "svlor004svtnp003", "svlor005svtnp005",
    "svlor005svtnp006", "swdxe004swtnp004", "swdxe007swtnp004",
    "swdxe007swtnp006", "swdxk001swtnp004", "swdxk003swtnp004",
    "swdxk003swtnp006", "swdxr002swtnp004", "swdxr004swtnp004",
    "swdxr004swtnp006",
})

_EU2_DISCOVERY_MAPS = frozenset({
    "sthde021sttdp009", "sthde021sttdp010", "sthdr009sttdp009",
    "sthdr009sttdp010", "suhde036sutdp012", "suhde036sutdp014",
    "suhdr009sutzp004", "suhdr009sutzp005", "surdk004sutzp004",
    "surdk004sutzp005",
})

_EU2_DEFENDER_MAPS = frozenset({"sthle022sttlp009", "sthle022sttlp010"})


def _layout_for(map_name: str | None) -> dict[TableKind, int]:
    key = (map_name or "").lower()
    if key in _EU3_MAPS:
        return _EU3_LAYOUT
    if key in _EU2_DISCOVERY_MAPS:
        return _EU2_DISCOVERY_LAYOUT
    if key in _EU2_DEFENDER_MAPS:
        return _EU2_DEFENDER_LAYOUT
    return _DEFAULT_LAYOUT


class TableInfoCatalog:
    """Table descriptions for one map variant, keyed by table index.

    ``map_name`` is the stock map resource name of the variant; names that
    are not recognised give a layout in which no table is known.
    """

    def __init__(self, map_name: str | None) -> None:
        layout = _layout_for(map_name)
        self._items = tuple(
            replace(item, index=layout[TableKind(item.kind)]) for item in _TEMPLATES
        )

    def __iter__(self) -> Iterator[TableInfoItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def lookup(self, index: int) -> TableInfoItem | None:
        """Return the description of the table at ``index``, or None.

        When several descriptions share the index the last one listed wins.
        """
        found = None
        for item in self._items:
            if item.index == index:
                found = item
        return found