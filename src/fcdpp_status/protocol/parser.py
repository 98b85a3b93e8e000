"""Response decoding for device reports.

Every response carries its payload from offset 2 of the report buffer.
"""

from __future__ import annotations

from ..models.filters import IFFilter, RFFilter, if_filter_from_byte, rf_filter_from_byte
from .report import PAYLOAD_OFFSET


def parse_query(buf: bytes | bytearray) -> str:
    """Parse the identity string, e.g. ``"FCDAPP 20.03 Brd 1.0 No blk"``.

    The string runs from offset 2 up to the first NUL byte, or to the end
    of the buffer if it is not terminated.
    """
    end = bytes(buf).find(b"\x00", PAYLOAD_OFFSET)
    if end < 0:
        end = len(buf)
    return bytes(buf[PAYLOAD_OFFSET:end]).decode("ascii", errors="replace")


def parse_frequency(buf: bytes | bytearray) -> int:
    """Parse a 4-byte little-endian frequency in Hz."""
    freq = 0
    for i in range(4):
        freq |= buf[PAYLOAD_OFFSET + i] << (8 * i)
    return freq


def parse_bool(buf: bytes | bytearray) -> bool:
    """Parse an on/off byte. Only an exact 1 counts as on."""
    return buf[PAYLOAD_OFFSET] == 1


def parse_if_gain(buf: bytes | bytearray) -> int:
    """Parse the IF gain in dB (nominally 0-59), returned as-is."""
    return buf[PAYLOAD_OFFSET]


def parse_rf_filter(buf: bytes | bytearray) -> RFFilter | int:
    return rf_filter_from_byte(buf[PAYLOAD_OFFSET])


def parse_if_filter(buf: bytes | bytearray) -> IFFilter | int:
    return if_filter_from_byte(buf[PAYLOAD_OFFSET])
