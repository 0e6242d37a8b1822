"""Shared price fixtures for indicator and signal tests."""

import pytest


@pytest.fixture
def peak_prices():
    """Rise to a peak at 140 and fall back to 90."""
    return [100.0, 110.0, 120.0, 130.0, 140.0, 130.0, 120.0, 110.0, 100.0, 90.0]


@pytest.fixture
def buy_prices():
    """
    Big drop, slow slide, then a rebound on the last price.

    The short SMA crosses above the long SMA on the last price (93 vs 92.4)
    while the 14-period RSI stays near 9.
    """
    return [200.0, 200.0, 100.0] + [float(p) for p in range(99, 88, -1)] + [100.0]


@pytest.fixture
def sell_prices():
    """Mirror image of buy_prices: the short SMA crosses below with RSI near 91."""
    return [0.0, 0.0, 100.0] + [float(p) for p in range(101, 112)] + [100.0]
