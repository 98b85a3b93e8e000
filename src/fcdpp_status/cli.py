"""Command-line entry point: print the dongle's current configuration."""

from __future__ import annotations

import argparse
import logging
import sys

from .dongle import FunCubeDongle
from .transport.errors import FunCubeError
from .transport.hid_connection import BACKENDS, PRODUCT_ID, VENDOR_ID

logger = logging.getLogger(__name__)


def _usb_id(text: str) -> int:
    """Parse a USB vendor/product ID given in hex (``0x04d8``) or decimal."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid USB ID: {text!r}")
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"USB ID must be 0-0xFFFF, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcdpp-status",
        description="Print the current configuration of a FunCube Dongle Pro+.",
    )
    parser.add_argument(
        "--vendor-id",
        type=_usb_id,
        default=VENDOR_ID,
        help=f"USB vendor ID to match (default: {VENDOR_ID:#06x})",
    )
    parser.add_argument(
        "--product-id",
        type=_usb_id,
        default=PRODUCT_ID,
        help=f"USB product ID to match (default: {PRODUCT_ID:#06x})",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="auto",
        help="USB backend (default: auto, hidapi with pyusb fallback)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log connection details (-v) or raw reports (-vv) to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Query the dongle and print the report. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )

    try:
        with FunCubeDongle.open(
            args.vendor_id, args.product_id, backend=args.backend
        ) as dongle:
            status = dongle.read_status()
    except FunCubeError as e:
        logger.critical("%s", e)
        return 1

    for line in status.report_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
