"""Tests for the report buffer layout helpers."""

from fcdpp_status.protocol.report import (
    COMMAND_OFFSET,
    MAX_PAYLOAD,
    PAYLOAD_OFFSET,
    REPORT_SIZE,
    clear,
    hexdump,
    new_buffer,
)


def test_report_layout_constants():
    """Report ID at 0, command at 1, payload from 2 in a 65-byte report."""
    assert REPORT_SIZE == 65
    assert COMMAND_OFFSET == 1
    assert PAYLOAD_OFFSET == 2
    assert MAX_PAYLOAD == 63


def test_new_buffer_is_zeroed():
    buf = new_buffer()
    assert isinstance(buf, bytearray)
    assert buf == bytearray(REPORT_SIZE)


def test_clear_zeroes_in_place():
    """clear() must keep the same object and length."""
    buf = bytearray(range(REPORT_SIZE))
    same = buf
    clear(buf)
    assert same is buf
    assert len(buf) == REPORT_SIZE
    assert not any(buf)


def test_hexdump_head():
    buf = bytearray(REPORT_SIZE)
    buf[1] = 0x66
    assert hexdump(buf, 3) == "00 66 00"


def test_hexdump_defaults_to_whole_report():
    buf = bytearray(REPORT_SIZE)
    buf[-1] = 0xAB
    dump = hexdump(buf)
    assert len(dump.split()) == REPORT_SIZE
    assert dump.endswith("ab")
