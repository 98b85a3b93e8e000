"""Tests for RF/IF filter labels and the unknown-value fallback."""

import pytest

from fcdpp_status.models.filters import (
    IFFilter,
    RFFilter,
    UNKNOWN_IF_FILTER,
    UNKNOWN_RF_FILTER,
    if_filter_from_byte,
    if_filter_label,
    rf_filter_from_byte,
    rf_filter_label,
)

RF_LABELS = [
    "0-4MHz", "4-8MHz", "8-16MHz", "16-32MHz", "32-75MHz", "75-125MHz",
    "125-250MHz", "145MHz", "410-875MHz", "435MHz", "875-2000MHz",
]

IF_LABELS = [
    "200kHz", "300kHz", "600kHz", "1536kHz", "5MHz", "6MHz", "7MHz", "8MHz",
]


@pytest.mark.parametrize("value,label", list(enumerate(RF_LABELS)))
def test_rf_filter_known_labels(value, label):
    assert rf_filter_label(value) == label
    assert rf_filter_from_byte(value) is RFFilter(value)


@pytest.mark.parametrize("value,label", list(enumerate(IF_LABELS)))
def test_if_filter_known_labels(value, label):
    assert if_filter_label(value) == label
    assert if_filter_from_byte(value) is IFFilter(value)


def test_rf_filter_unknown_values():
    """Every byte outside the table falls back to the unknown label."""
    for value in range(len(RF_LABELS), 256):
        assert rf_filter_label(value) == UNKNOWN_RF_FILTER
        assert rf_filter_from_byte(value) == value
        assert not isinstance(rf_filter_from_byte(value), RFFilter)


def test_if_filter_unknown_values():
    for value in range(len(IF_LABELS), 256):
        assert if_filter_label(value) == UNKNOWN_IF_FILTER
        assert if_filter_from_byte(value) == value


def test_fallback_label_text():
    assert UNKNOWN_RF_FILTER == "unknown RF filter"
    assert UNKNOWN_IF_FILTER == "unknown IF filter"
