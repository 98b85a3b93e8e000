"""Data models for filter selectors and status snapshots."""

from .filters import IFFilter, RFFilter
from .status import DongleStatus
