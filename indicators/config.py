"""
Signal Configuration

Tunable indicator parameters shared by the calculators and the signal engine.
Configuration can be built directly, from a dictionary, or from a JSON file.

Example:
    >>> config = SignalConfig(short_period=10, long_period=30)
    >>> config = SignalConfig.from_dict(load_config('data/signal.json'))
"""

import json
import logging
import math
import numbers
import os

logger = logging.getLogger(__name__)


def _as_period(name, value):
    # bool is an Integral subclass
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value) or not float(value).is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def _as_threshold(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


class SignalConfig:
    """
    Indicator periods and RSI confirmation thresholds.

    Parameters:
        short_period (int): Short moving average / EMA length (default 3)
        long_period (int): Long moving average / EMA length (default 5)
        signal_period (int): MACD signal line length (default 3)
        rsi_period (int): RSI period (default 14)
        overbought (float): RSI level confirming a sell (default 75.0)
        oversold (float): RSI level confirming a buy (default 25.0)
    """

    FIELDS = ('short_period', 'long_period', 'signal_period',
              'rsi_period', 'overbought', 'oversold')

    def __init__(self, short_period=3, long_period=5, signal_period=3,
                 rsi_period=14, overbought=75.0, oversold=25.0):
        self.short_period = _as_period('short_period', short_period)
        self.long_period = _as_period('long_period', long_period)
        self.signal_period = _as_period('signal_period', signal_period)
        self.rsi_period = _as_period('rsi_period', rsi_period)
        self.overbought = _as_threshold('overbought', overbought)
        self.oversold = _as_threshold('oversold', oversold)
        self._validate()

    def _validate(self):
        for name in ('short_period', 'long_period', 'signal_period'):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")

        # One price difference is the least RSI can work with
        if self.rsi_period < 2:
            raise ValueError(f"rsi_period must be at least 2, got {self.rsi_period}")

        if self.short_period >= self.long_period:
            raise ValueError(
                f"short_period ({self.short_period}) must be less than "
                f"long_period ({self.long_period})"
            )

        for name in ('overbought', 'oversold'):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")

    @property
    def min_prices(self):
        """Smallest price series the signal engine can evaluate."""
        return max(self.long_period + 1, self.rsi_period)

    @classmethod
    def from_dict(cls, params):
        """
        Build a configuration from a dictionary.

        Args:
            params (dict): Any subset of SignalConfig.FIELDS

        Returns:
            SignalConfig: Configuration with defaults for missing keys

        Raises:
            ValueError: If an unknown key is present
        """
        unknown = set(params) - set(cls.FIELDS)
        if unknown:
            available = ', '.join(cls.FIELDS)
            raise ValueError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}. "
                f"Available keys: {available}"
            )
        return cls(**params)

    def to_dict(self):
        return {name: getattr(self, name) for name in self.FIELDS}

    def __eq__(self, other):
        if not isinstance(other, SignalConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        params = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"SignalConfig({params})"


def load_config(config_path):
    """
    Load configuration from JSON file.

    Args:
        config_path (str): Path to JSON config file

    Returns:
        dict: Configuration dictionary
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if os.path.getsize(config_path) == 0:
        raise ValueError(f"Configuration file is empty: {config_path}")

    with open(config_path, 'r') as f:
        config = json.load(f)

    logger.debug(f"Loaded configuration from {config_path}: {config}")
    return config
