"""Layout of the 65-byte HID report exchanged with the dongle.

Report layout::

    +-----------+---------+------------------------------------+
    | Report ID | Command |              Payload               |
    | 1 byte    | 1 byte  | 63 bytes, zero padded              |
    +-----------+---------+------------------------------------+

- Report ID: always 0, the device uses unnumbered reports
- Command: one of :class:`~fcdpp_status.protocol.commands.Command`
- Payload: little-endian fields, starting at offset 2

Responses are read back into the same buffer starting at offset 0. The
device echoes the command at offset 0 and a status byte at offset 1, so
response payloads also start at offset 2.
"""

from __future__ import annotations

REPORT_SIZE = 65
REPORT_ID = 0x00
COMMAND_OFFSET = 1
PAYLOAD_OFFSET = 2
MAX_PAYLOAD = REPORT_SIZE - PAYLOAD_OFFSET  # 63


def new_buffer() -> bytearray:
    """Return a zeroed report buffer."""
    return bytearray(REPORT_SIZE)


def clear(buf: bytearray) -> None:
    """Zero every byte of *buf* in place."""
    buf[:] = bytes(len(buf))


def hexdump(buf: bytes | bytearray, length: int | None = None) -> str:
    """Hex rendering of a report, or of its first *length* bytes, for debug logging."""
    return bytes(buf[:length]).hex(" ")
