"""
Indicators Module

Technical indicator calculators used by the signal engine.
"""

from .config import SignalConfig, load_config
from .exceptions import IndicatorError, InsufficientDataError, InvalidPriceError
from .technical import SMA, EMA, simple_moving_average, moving_average_series
from .oscillators import RSI, relative_strength_index, macd_histogram, calculate_rsi_and_macd

__all__ = [
    'SignalConfig',
    'load_config',
    'IndicatorError',
    'InsufficientDataError',
    'InvalidPriceError',
    'relative_strength_index',
    'macd_histogram',
    'calculate_rsi_and_macd',
    'SMA',
    'EMA',
    'RSI',
    'simple_moving_average',
    'moving_average_series',
]
