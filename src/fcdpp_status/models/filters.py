"""RF and IF filter selectors.

Both are single-byte enumerations. Firmware may report a value outside the
known set; such values are kept as plain ints and rendered with a fallback
label instead of raising.
"""

from __future__ import annotations

from enum import IntEnum

UNKNOWN_RF_FILTER = "unknown RF filter"
UNKNOWN_IF_FILTER = "unknown IF filter"


class RFFilter(IntEnum):
    """Band-select filter ahead of the tuner."""

    TRFE_0_4 = 0
    TRFE_4_8 = 1
    TRFE_8_16 = 2
    TRFE_16_32 = 3
    TRFE_32_75 = 4
    TRFE_75_125 = 5
    TRFE_125_250 = 6
    TRFE_145 = 7
    TRFE_410_875 = 8
    TRFE_435 = 9
    TRFE_875_2000 = 10


class IFFilter(IntEnum):
    """Intermediate-frequency bandwidth filter."""

    TIFE_200KHZ = 0
    TIFE_300KHZ = 1
    TIFE_600KHZ = 2
    TIFE_1536KHZ = 3
    TIFE_5MHZ = 4
    TIFE_6MHZ = 5
    TIFE_7MHZ = 6
    TIFE_8MHZ = 7


RF_FILTER_LABELS: dict[int, str] = {
    RFFilter.TRFE_0_4: "0-4MHz",
    RFFilter.TRFE_4_8: "4-8MHz",
    RFFilter.TRFE_8_16: "8-16MHz",
    RFFilter.TRFE_16_32: "16-32MHz",
    RFFilter.TRFE_32_75: "32-75MHz",
    RFFilter.TRFE_75_125: "75-125MHz",
    RFFilter.TRFE_125_250: "125-250MHz",
    RFFilter.TRFE_145: "145MHz",
    RFFilter.TRFE_410_875: "410-875MHz",
    RFFilter.TRFE_435: "435MHz",
    RFFilter.TRFE_875_2000: "875-2000MHz",
}

IF_FILTER_LABELS: dict[int, str] = {
    IFFilter.TIFE_200KHZ: "200kHz",
    IFFilter.TIFE_300KHZ: "300kHz",
    IFFilter.TIFE_600KHZ: "600kHz",
    IFFilter.TIFE_1536KHZ: "1536kHz",
    IFFilter.TIFE_5MHZ: "5MHz",
    IFFilter.TIFE_6MHZ: "6MHz",
    IFFilter.TIFE_7MHZ: "7MHz",
    IFFilter.TIFE_8MHZ: "8MHz",
}


def rf_filter_from_byte(value: int) -> RFFilter | int:
    """Return the RFFilter member for *value*, or the raw int if unknown."""
    try:
        return RFFilter(value)
    except ValueError:
        return value


def if_filter_from_byte(value: int) -> IFFilter | int:
    """Return the IFFilter member for *value*, or the raw int if unknown."""
    try:
        return IFFilter(value)
    except ValueError:
        return value


def rf_filter_label(value: int) -> str:
    return RF_FILTER_LABELS.get(value, UNKNOWN_RF_FILTER)


def if_filter_label(value: int) -> str:
    return IF_FILTER_LABELS.get(value, UNKNOWN_IF_FILTER)
