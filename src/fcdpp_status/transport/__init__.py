"""USB HID transport: device discovery, open/close, report exchange."""

from .errors import (
    DeviceNotFoundError,
    DeviceOpenError,
    DiscoveryError,
    FunCubeError,
    MultipleDevicesError,
    TransportError,
)
from .hid_connection import DeviceInfo, HIDConnection
