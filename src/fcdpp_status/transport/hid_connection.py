"""USB HID connection to the FunCube Dongle Pro+.

Supports both ``hidapi`` (preferred) and ``pyusb`` backends. The dongle
exposes its command channel as a HID-class interface exchanging fixed
65-byte reports (report ID byte plus 64 bytes of data).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..protocol.report import REPORT_ID, REPORT_SIZE, hexdump
from .errors import (
    DeviceNotFoundError,
    DeviceOpenError,
    MultipleDevicesError,
    TransportError,
)

logger = logging.getLogger(__name__)

VENDOR_ID = 0x04D8
PRODUCT_ID = 0xFB31

BACKENDS = ("auto", "hidapi", "pyusb")

USB_CLASS_HID = 0x03
HID_SET_REPORT = 0x09
HID_REQUEST_TYPE_OUT = 0x21  # host-to-device | class | interface
HID_REPORT_TYPE_OUTPUT = 0x02


@dataclass(frozen=True)
class DeviceInfo:
    """One matching dongle as reported by the enumerating backend."""

    vendor_id: int = VENDOR_ID
    product_id: int = PRODUCT_ID
    path: Any = None
    manufacturer: str = ""
    product: str = ""
    serial_number: str = ""
    backend: str = ""


def require_single_device(
    matches: list[DeviceInfo], vendor_id: int, product_id: int
) -> DeviceInfo:
    """Return the only match, refusing to pick between several.

    Raises:
        DeviceNotFoundError: If *matches* is empty.
        MultipleDevicesError: If *matches* holds more than one device.
    """
    if not matches:
        raise DeviceNotFoundError(
            f"No FunCube Dongle found ({vendor_id:#06x}:{product_id:#06x})"
        )

    if len(matches) > 1:
        raise MultipleDevicesError(
            f"Multiple matching dongles found ({len(matches)} devices)",
            devices=matches,
        )

    return matches[0]


class HIDConnection:
    """Manages the USB HID connection to the dongle.

    Usage::

        conn = HIDConnection()
        conn.open()
        conn.write(report)
        conn.read_into(buf)
        conn.close()
    """

    def __init__(
        self,
        vendor_id: int = VENDOR_ID,
        product_id: int = PRODUCT_ID,
        backend: str = "auto",
    ) -> None:
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}'. Valid: {list(BACKENDS)}")
        self._vendor_id = vendor_id
        self._product_id = product_id
        self._requested_backend = backend
        self._device = None
        self._backend: str = ""
        self._connected = False
        self._device_info = DeviceInfo(vendor_id=vendor_id, product_id=product_id)
        # pyusb only
        self._interface_number = 0
        self._ep_in = None
        self._ep_out = None

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def device_info(self) -> DeviceInfo:
        return self._device_info

    @property
    def backend(self) -> str:
        return self._backend

    def open(self) -> DeviceInfo:
        """Find and open the one matching dongle.

        With the ``auto`` backend hidapi is tried first. pyusb is used only
        if the ``hid`` module is missing or cannot enumerate; discovery
        and open errors from hidapi are final.

        Returns:
            DeviceInfo of the opened dongle.

        Raises:
            DeviceNotFoundError: If no matching dongle is present.
            MultipleDevicesError: If more than one matching dongle is present.
            DeviceOpenError: If the dongle cannot be opened.
        """
        if self._requested_backend == "pyusb":
            return self._open_pyusb()

        try:
            matches = self._enumerate_hidapi()
        except (ImportError, OSError) as e:
            if self._requested_backend == "hidapi":
                raise DeviceOpenError(f"hidapi backend unavailable: {e}") from e
            logger.debug("hidapi backend failed: %s, trying pyusb", e)
            return self._open_pyusb()

        info = require_single_device(matches, self._vendor_id, self._product_id)
        return self._open_hidapi(info)

    def _enumerate_hidapi(self) -> list[DeviceInfo]:
        import hid

        return [
            DeviceInfo(
                vendor_id=d["vendor_id"],
                product_id=d["product_id"],
                path=d["path"],
                manufacturer=d.get("manufacturer_string") or "",
                product=d.get("product_string") or "",
                serial_number=d.get("serial_number") or "",
                backend="hidapi",
            )
            for d in hid.enumerate(self._vendor_id, self._product_id)
        ]

    def _open_hidapi(self, info: DeviceInfo) -> DeviceInfo:
        """Open using the hidapi library."""
        import hid

        device = hid.device()
        try:
            device.open_path(info.path)
            device.set_nonblocking(False)
        except (OSError, ValueError) as e:
            raise DeviceOpenError(
                f"Could not open FunCube Dongle at {info.path!r}. "
                f"Ensure you have permissions. Last error: {e}"
            ) from e

        self._device = device
        self._backend = "hidapi"
        self._connected = True
        self._device_info = info

        logger.info(
            "Connected via hidapi: %s %s", info.manufacturer, info.product
        )
        return info

    def _open_pyusb(self) -> DeviceInfo:
        """Open using pyusb + libusb, claiming the HID interface directly."""
        try:
            import usb.core
            import usb.util
        except ImportError as e:
            raise DeviceOpenError(f"pyusb backend unavailable: {e}") from e

        try:
            devices = list(
                usb.core.find(
                    find_all=True, idVendor=self._vendor_id, idProduct=self._product_id
                )
            )
        except (usb.core.USBError, usb.core.NoBackendError) as e:
            raise DeviceOpenError(f"USB enumeration failed: {e}") from e
        matches = [
            DeviceInfo(
                vendor_id=self._vendor_id,
                product_id=self._product_id,
                path=dev,
                backend="pyusb",
            )
            for dev in devices
        ]
        dev = require_single_device(matches, self._vendor_id, self._product_id).path

        claimed = False
        try:
            cfg = dev.get_active_configuration()
            intf = usb.util.find_descriptor(cfg, bInterfaceClass=USB_CLASS_HID)
            if intf is None:
                raise DeviceOpenError("Dongle has no HID interface")

            number = intf.bInterfaceNumber
            ep_in = usb.util.find_descriptor(
                intf,
                custom_match=lambda e: usb.util.endpoint_direction(e.bEndpointAddress)
                == usb.util.ENDPOINT_IN,
            )
            ep_out = usb.util.find_descriptor(
                intf,
                custom_match=lambda e: usb.util.endpoint_direction(e.bEndpointAddress)
                == usb.util.ENDPOINT_OUT,
            )
            if ep_in is None:
                raise DeviceOpenError("Dongle HID interface has no IN endpoint")

            if dev.is_kernel_driver_active(number):
                dev.detach_kernel_driver(number)
            usb.util.claim_interface(dev, number)
            claimed = True

            info = DeviceInfo(
                vendor_id=self._vendor_id,
                product_id=self._product_id,
                path=f"usb:{dev.bus}:{dev.address}",
                manufacturer=usb.util.get_string(dev, dev.iManufacturer) or "",
                product=usb.util.get_string(dev, dev.iProduct) or "",
                backend="pyusb",
            )
        except (usb.core.USBError, ValueError, NotImplementedError) as e:
            if claimed:
                self._release_pyusb(dev, number)
            raise DeviceOpenError(
                f"Could not claim FunCube Dongle "
                f"({self._vendor_id:#06x}:{self._product_id:#06x}). "
                f"Ensure you have permissions. Last error: {e}"
            ) from e

        self._device = dev
        self._backend = "pyusb"
        self._connected = True
        self._interface_number = number
        self._ep_in = ep_in
        self._ep_out = ep_out
        self._device_info = info

        logger.info(
            "Connected via pyusb: %s %s", info.manufacturer, info.product
        )
        return info

    def _release_pyusb(self, dev, number: int) -> None:
        import usb.core
        import usb.util

        try:
            usb.util.release_interface(dev, number)
            usb.util.dispose_resources(dev)
        except usb.core.USBError as e:
            logger.warning("Error releasing interface %d: %s", number, e)

    def close(self) -> None:
        """Close the USB connection."""
        if not self._connected:
            return

        try:
            if self._backend == "hidapi":
                self._device.close()
            elif self._backend == "pyusb":
                self._release_pyusb(self._device, self._interface_number)
        except Exception as e:
            logger.warning("Error closing device: %s", e)
        finally:
            self._device = None
            self._ep_in = None
            self._ep_out = None
            self._connected = False
            logger.info("Disconnected")

    def write(self, data: bytes | bytearray) -> int:
        """Write a 65-byte report (report ID first) to the device.

        Returns:
            Number of bytes the backend reports as written.

        Raises:
            ConnectionError: If not connected.
            TransportError: If the write fails.
        """
        if not self._connected:
            raise ConnectionError("Not connected to device")

        if len(data) != REPORT_SIZE:
            raise ValueError(
                f"HID report must be {REPORT_SIZE} bytes, got {len(data)}"
            )

        logger.debug(">> %s", hexdump(data))
        try:
            if self._backend == "hidapi":
                written = self._device.write(bytes(data))
            elif self._backend == "pyusb":
                written = self._write_pyusb(bytes(data))
            else:
                raise RuntimeError(f"Unknown backend: {self._backend}")
        except (OSError, ValueError) as e:
            raise TransportError(f"Report write failed: {e}") from e

        if written < 0:
            raise TransportError(f"Report write failed ({self._device_error()})")
        return written

    def _write_pyusb(self, data: bytes) -> int:
        # Report ID 0 is not sent on the wire
        wire = data[1:] if data[0] == REPORT_ID else data
        if self._ep_out is not None:
            return self._ep_out.write(wire, timeout=0)
        return self._device.ctrl_transfer(
            HID_REQUEST_TYPE_OUT,
            HID_SET_REPORT,
            (HID_REPORT_TYPE_OUTPUT << 8) | data[0],
            self._interface_number,
            wire,
            timeout=0,
        )

    def read_into(self, buf: bytearray) -> int:
        """Block until the device answers, then copy its report into *buf*.

        The response is placed from offset 0; bytes past its length are
        left untouched.

        Returns:
            Number of bytes read.

        Raises:
            ConnectionError: If not connected.
            TransportError: If the read fails or returns no data.
        """
        if not self._connected:
            raise ConnectionError("Not connected to device")

        try:
            if self._backend == "hidapi":
                data = self._device.read(len(buf))
            elif self._backend == "pyusb":
                data = self._ep_in.read(self._ep_in.wMaxPacketSize, timeout=0)
            else:
                raise RuntimeError(f"Unknown backend: {self._backend}")
        except (OSError, ValueError) as e:
            raise TransportError(f"Report read failed: {e}") from e

        if not data:
            raise TransportError("Report read returned no data")

        data = bytes(data)[: len(buf)]
        buf[: len(data)] = data
        logger.debug("<< %s", hexdump(buf))
        return len(data)

    def _device_error(self) -> str:
        if self._backend == "hidapi" and hasattr(self._device, "error"):
            return self._device.error() or "unknown error"
        return "unknown error"
