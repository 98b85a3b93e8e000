"""Status snapshot model."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .filters import if_filter_label, rf_filter_label

LABEL_WIDTH = 12


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class DongleStatus:
    """One full reading of the dongle's configuration.

    Filter fields hold the raw byte the device returned, so values outside
    the known filter tables are preserved.
    """

    query: str = ""
    frequency_hz: int = 0
    lna_gain: bool = False
    rf_filter: int = 0
    mixer_gain: bool = False
    if_gain: int = 0
    if_filter: int = 0
    bias_tee: bool = False

    @property
    def rf_filter_label(self) -> str:
        return rf_filter_label(self.rf_filter)

    @property
    def if_filter_label(self) -> str:
        return if_filter_label(self.if_filter)

    def report_lines(self) -> list[str]:
        """Render the status as right-aligned ``label: value`` lines."""
        rows = [
            ("Query", self.query),
            ("Freq", f"{self.frequency_hz} Hz"),
            ("LNA gain", _flag(self.lna_gain)),
            ("RF filter", self.rf_filter_label),
            ("Mixer gain", _flag(self.mixer_gain)),
            ("IF gain", f"{self.if_gain} dB"),
            ("IF filter", self.if_filter_label),
            ("Bias tee", _flag(self.bias_tee)),
        ]
        return [f"{(label + ':').rjust(LABEL_WIDTH)} {value}" for label, value in rows]

    def to_dict(self) -> dict:
        d = asdict(self)
        d["rf_filter"] = int(self.rf_filter)
        d["if_filter"] = int(self.if_filter)
        d["rf_filter_label"] = self.rf_filter_label
        d["if_filter_label"] = self.if_filter_label
        return d
