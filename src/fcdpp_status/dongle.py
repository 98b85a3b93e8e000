"""Device session for one FunCube Dongle Pro+.

The session owns the open connection and a single 65-byte report buffer
that every exchange reuses. Exchanges are synchronous and one at a time;
the buffer is not safe for concurrent use.
"""

from __future__ import annotations

import logging

from .models.filters import IFFilter, RFFilter
from .models.status import DongleStatus
from .protocol.commands import (
    Command,
    build_request,
    encode_filter,
    encode_flag,
    encode_frequency_hz,
    encode_frequency_khz,
    encode_if_gain,
)
from .protocol.parser import (
    parse_bool,
    parse_frequency,
    parse_if_filter,
    parse_if_gain,
    parse_query,
    parse_rf_filter,
)
from .protocol.report import new_buffer
from .transport.hid_connection import PRODUCT_ID, VENDOR_ID, HIDConnection

logger = logging.getLogger(__name__)


class FunCubeDongle:
    """Request/response accessors over an open connection.

    Usage::

        with FunCubeDongle.open() as dongle:
            print(dongle.frequency())
    """

    def __init__(self, connection: HIDConnection) -> None:
        self._connection = connection
        self._buf = new_buffer()

    @classmethod
    def open(
        cls,
        vendor_id: int = VENDOR_ID,
        product_id: int = PRODUCT_ID,
        backend: str = "auto",
    ) -> FunCubeDongle:
        """Discover and open the single matching dongle.

        Raises:
            DiscoveryError: If zero or several dongles match.
            DeviceOpenError: If the dongle cannot be opened.
        """
        connection = HIDConnection(vendor_id, product_id, backend=backend)
        connection.open()
        return cls(connection)

    @property
    def connection(self) -> HIDConnection:
        return self._connection

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> FunCubeDongle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _exchange(self, command: Command, payload: bytes = b"") -> bytearray:
        """Send one request and read its response into the shared buffer."""
        build_request(self._buf, command, payload)
        self._connection.write(self._buf)
        self._connection.read_into(self._buf)
        return self._buf

    # ─── READ ACCESSORS ───────────────────────────────────────────────

    def query(self) -> str:
        """Firmware identity string, e.g. ``"FCDAPP 20.03 Brd 1.0 No blk"``."""
        return parse_query(self._exchange(Command.QUERY))

    def frequency(self) -> int:
        """Tuned frequency in Hz."""
        return parse_frequency(self._exchange(Command.GET_FREQUENCY_HZ))

    def lna_gain(self) -> bool:
        return parse_bool(self._exchange(Command.GET_LNA_GAIN))

    def rf_filter(self) -> RFFilter | int:
        return parse_rf_filter(self._exchange(Command.GET_RF_FILTER))

    def mixer_gain(self) -> bool:
        return parse_bool(self._exchange(Command.GET_MIXER_GAIN))

    def if_gain(self) -> int:
        """IF gain in dB."""
        return parse_if_gain(self._exchange(Command.GET_IF_GAIN))

    def if_filter(self) -> IFFilter | int:
        return parse_if_filter(self._exchange(Command.GET_IF_FILTER))

    def bias_tee(self) -> bool:
        return parse_bool(self._exchange(Command.GET_BIAS_TEE))

    def read_status(self) -> DongleStatus:
        """Read every reported attribute, in report order."""
        status = DongleStatus(
            query=self.query(),
            frequency_hz=self.frequency(),
            lna_gain=self.lna_gain(),
            rf_filter=self.rf_filter(),
            mixer_gain=self.mixer_gain(),
            if_gain=self.if_gain(),
            if_filter=self.if_filter(),
            bias_tee=self.bias_tee(),
        )
        logger.debug("Read status: %s", status)
        return status

    # ─── WRITE ACCESSORS ──────────────────────────────────────────────

    def set_frequency(self, hz: int) -> int:
        """Tune to *hz*. Returns the frequency the dongle actually set."""
        return parse_frequency(
            self._exchange(Command.SET_FREQUENCY_HZ, encode_frequency_hz(hz))
        )

    def set_frequency_khz(self, khz: int) -> None:
        self._exchange(Command.SET_FREQUENCY_KHZ, encode_frequency_khz(khz))

    def set_lna_gain(self, enabled: bool) -> None:
        self._exchange(Command.SET_LNA_GAIN, encode_flag(enabled))

    def set_rf_filter(self, value: RFFilter | int) -> None:
        self._exchange(Command.SET_RF_FILTER, encode_filter(value))

    def set_mixer_gain(self, enabled: bool) -> None:
        self._exchange(Command.SET_MIXER_GAIN, encode_flag(enabled))

    def set_if_gain(self, db: int) -> None:
        self._exchange(Command.SET_IF_GAIN, encode_if_gain(db))

    def set_if_filter(self, value: IFFilter | int) -> None:
        self._exchange(Command.SET_IF_FILTER, encode_filter(value))

    def set_bias_tee(self, enabled: bool) -> None:
        self._exchange(Command.SET_BIAS_TEE, encode_flag(enabled))
