"""Command codes and request encoders.

Each command is a single byte written at offset 1 of the report. Read and
write commands share one numeric namespace; read commands carry no payload,
write commands carry a little-endian payload starting at offset 2.
"""

from __future__ import annotations

from enum import IntEnum

from .report import COMMAND_OFFSET, MAX_PAYLOAD, PAYLOAD_OFFSET, clear, new_buffer

MAX_FREQUENCY_HZ = 0xFFFFFFFF
MAX_FREQUENCY_KHZ = 0xFFFFFF
MAX_IF_GAIN_DB = 59


class Command(IntEnum):
    """Dongle command codes."""

    QUERY = 1

    SET_FREQUENCY_KHZ = 100
    SET_FREQUENCY_HZ = 101
    GET_FREQUENCY_HZ = 102

    SET_LNA_GAIN = 110
    SET_RF_FILTER = 113
    SET_MIXER_GAIN = 114
    SET_IF_GAIN = 117
    SET_IF_FILTER = 122
    SET_BIAS_TEE = 126

    GET_LNA_GAIN = 150
    GET_RF_FILTER = 153
    GET_MIXER_GAIN = 154
    GET_IF_GAIN = 157
    GET_IF_FILTER = 162
    GET_BIAS_TEE = 166


def build_request(buf: bytearray, command: Command, payload: bytes = b"") -> bytearray:
    """Encode a request into an existing report buffer.

    The whole buffer is zeroed first so nothing from a previous exchange
    is sent along with this one.

    Args:
        buf: A 65-byte report buffer, modified in place.
        command: Command code for offset 1.
        payload: Bytes to place from offset 2.

    Returns:
        The same buffer, for chaining.
    """
    if len(payload) > MAX_PAYLOAD:
        raise ValueError(
            f"Payload must be at most {MAX_PAYLOAD} bytes, got {len(payload)}"
        )
    clear(buf)
    buf[COMMAND_OFFSET] = Command(command).value
    buf[PAYLOAD_OFFSET : PAYLOAD_OFFSET + len(payload)] = payload
    return buf


def build_command(command: Command, payload: bytes = b"") -> bytes:
    """Build a fresh 65-byte report for a command."""
    return bytes(build_request(new_buffer(), command, payload))


def encode_frequency_hz(hz: int) -> bytes:
    """Encode a frequency in Hz as 4 little-endian bytes."""
    if not 0 <= hz <= MAX_FREQUENCY_HZ:
        raise ValueError(f"Frequency must be 0-{MAX_FREQUENCY_HZ} Hz, got {hz}")
    return hz.to_bytes(4, "little")


def encode_frequency_khz(khz: int) -> bytes:
    """Encode a frequency in kHz as 3 little-endian bytes."""
    if not 0 <= khz <= MAX_FREQUENCY_KHZ:
        raise ValueError(f"Frequency must be 0-{MAX_FREQUENCY_KHZ} kHz, got {khz}")
    return khz.to_bytes(3, "little")


def encode_flag(enabled: bool) -> bytes:
    """Encode an on/off switch as a single 1/0 byte."""
    return bytes([1 if enabled else 0])


def encode_if_gain(db: int) -> bytes:
    """Encode the IF gain in dB.

    Args:
        db: Gain 0-59.
    """
    if not 0 <= db <= MAX_IF_GAIN_DB:
        raise ValueError(f"IF gain must be 0-{MAX_IF_GAIN_DB} dB, got {db}")
    return bytes([db])


def encode_filter(value: int) -> bytes:
    """Encode an RF or IF filter selector as one byte."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Filter value must be 0-255, got {value}")
    return bytes([int(value)])
