"""Protocol layer: report layout, command encoders, and response parsing."""

from .commands import Command, build_command, build_request
from .report import REPORT_SIZE
