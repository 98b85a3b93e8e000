"""Tests for the command-line report and exit codes."""

from __future__ import annotations

import logging
import sys
from unittest.mock import MagicMock, patch

import pytest

from fcdpp_status import cli
from fcdpp_status.models.filters import IFFilter, RFFilter
from fcdpp_status.models.status import DongleStatus
from fcdpp_status.transport.errors import (
    DeviceNotFoundError,
    DeviceOpenError,
    MultipleDevicesError,
    TransportError,
)
from fcdpp_status.transport.hid_connection import PRODUCT_ID, VENDOR_ID

STATUS = DongleStatus(
    query="FCDAPP 20.03 Brd 1.0 No blk",
    frequency_hz=10000,
    lna_gain=True,
    rf_filter=RFFilter.TRFE_0_4,
    mixer_gain=False,
    if_gain=59,
    if_filter=IFFilter.TIFE_8MHZ,
    bias_tee=True,
)


def _mock_dongle(status=STATUS):
    dongle = MagicMock()
    dongle.__enter__.return_value = dongle
    dongle.__exit__.return_value = False
    dongle.read_status.return_value = status
    return dongle


def test_main_prints_report(capsys):
    dongle = _mock_dongle()
    with patch.object(cli.FunCubeDongle, "open", return_value=dongle) as open_:
        assert cli.main([]) == 0

    open_.assert_called_once_with(VENDOR_ID, PRODUCT_ID, backend="auto")
    dongle.__exit__.assert_called_once()
    assert capsys.readouterr().out.splitlines() == [
        "      Query: FCDAPP 20.03 Brd 1.0 No blk",
        "       Freq: 10000 Hz",
        "   LNA gain: true",
        "  RF filter: 0-4MHz",
        " Mixer gain: false",
        "    IF gain: 59 dB",
        "  IF filter: 8MHz",
        "   Bias tee: true",
    ]


@pytest.mark.parametrize(
    "error",
    [
        DeviceNotFoundError("No FunCube Dongle found"),
        MultipleDevicesError("Multiple matching dongles found (2 devices)", devices=[1, 2]),
        DeviceOpenError("Could not open"),
    ],
)
def test_main_open_errors_exit_nonzero(capsys, error):
    with patch.object(cli.FunCubeDongle, "open", side_effect=error):
        assert cli.main([]) == 1
    assert capsys.readouterr().out == ""


def test_main_transport_error_prints_no_partial_report(capsys):
    dongle = _mock_dongle()
    dongle.read_status.side_effect = TransportError("Report read failed")
    with patch.object(cli.FunCubeDongle, "open", return_value=dongle):
        assert cli.main([]) == 1

    dongle.__exit__.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_options():
    dongle = _mock_dongle()
    with patch.object(cli.FunCubeDongle, "open", return_value=dongle) as open_:
        cli.main(["--vendor-id", "0x04d8", "--product-id", "64305", "--backend", "pyusb", "-vv"])
    open_.assert_called_once_with(0x04D8, 0xFB31, backend="pyusb")


def test_bad_usb_id_rejected():
    with pytest.raises(SystemExit):
        cli.main(["--vendor-id", "0x10000"])
    with pytest.raises(SystemExit):
        cli.main(["--product-id", "dongle"])


def test_main_no_device_end_to_end(capsys):
    """With hidapi reporting no devices, nothing is written and exit is 1."""
    fake_hid = MagicMock()
    fake_hid.enumerate.return_value = []
    with patch.dict(sys.modules, {"hid": fake_hid}):
        assert cli.main([]) == 1

    fake_hid.device.return_value.write.assert_not_called()
    assert capsys.readouterr().out == ""


def test_multiple_devices_reported_once(caplog):
    """An ambiguous discovery produces a single error-level diagnostic."""
    entry = {"path": b"/dev/hidraw3", "vendor_id": VENDOR_ID, "product_id": PRODUCT_ID}
    fake_hid = MagicMock()
    fake_hid.enumerate.return_value = [entry, dict(entry, path=b"/dev/hidraw4")]
    with patch.dict(sys.modules, {"hid": fake_hid}):
        assert cli.main([]) == 1

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "Multiple matching dongles found (2 devices)" in errors[0].getMessage()


def test_pyusb_open_failure_exits_nonzero(capsys):
    """Non-USBError failures while opening via pyusb still end in exit code 1."""
    dev = MagicMock(bus=1, address=7, iManufacturer=1, iProduct=2)
    dev.is_kernel_driver_active.return_value = False
    intf = MagicMock(bInterfaceNumber=2)
    ep_in = MagicMock(bEndpointAddress=0x82, wMaxPacketSize=64)

    usb = MagicMock()
    usb.core.USBError = type("USBError", (IOError,), {})
    usb.core.NoBackendError = type("NoBackendError", (ValueError,), {})
    usb.core.find.return_value = iter([dev])
    usb.util.ENDPOINT_IN = 0x80
    usb.util.endpoint_direction.side_effect = lambda addr: addr & 0x80
    usb.util.find_descriptor.side_effect = lambda parent, **kw: (
        intf if "bInterfaceClass" in kw else (ep_in if kw["custom_match"](ep_in) else None)
    )
    usb.util.get_string.side_effect = ValueError("The device has no langid")

    modules = {"hid": None, "usb": usb, "usb.core": usb.core, "usb.util": usb.util}
    with patch.dict(sys.modules, modules):
        assert cli.main(["--backend", "pyusb"]) == 1

    usb.util.release_interface.assert_called_once_with(dev, 2)
    assert capsys.readouterr().out == ""
