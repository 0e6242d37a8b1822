"""
Base Strategy Class

This module provides an abstract base class for signal-generating strategies.
A strategy receives an already-collected price series for one symbol and
returns a single trading signal for the most recent price.

All concrete strategies should inherit from BaseStrategy and implement
generate_signals().
"""

from abc import ABC, abstractmethod
import logging

import numpy as np
import pandas as pd

from indicators import InvalidPriceError

logger = logging.getLogger(__name__)


class BaseStrategy(ABC):
    """
    Abstract base class for trading strategies.

    Subclasses must implement:
    - generate_signals(): Logic to turn a validated price series into a Signal
    """

    def __init__(self, **strategy_params):
        """
        Initialize the strategy.

        Args:
            **strategy_params: Strategy-specific parameters (e.g., short_period=3)
        """
        self.strategy_params = strategy_params

        # Set when __call__ is invoked
        self.symbol = None
        self.prices = None

        logger.info(f"Initialized {self.__class__.__name__}")
        logger.info(f"Strategy parameters: {strategy_params}")

    def __call__(self, symbol, prices):
        """
        Run the strategy on a price series.

        Args:
            symbol (str): Ticker symbol, used for logging
            prices (sequence of float or pd.Series): Prices, oldest first

        Returns:
            Signal: Signal for the latest price

        Raises:
            InvalidPriceError: If the series contains negative or non-finite prices
            InsufficientDataError: If the series is too short for the indicators
        """
        self.symbol = symbol
        self.prices = self._validate_prices(prices)

        logger.info(f"Running {self.__class__.__name__} on {symbol} with {len(self.prices)} prices")

        signal = self.generate_signals(self.prices)

        logger.info(f"{self.__class__.__name__} generated {signal.name} for {symbol}")
        return signal

    @staticmethod
    def _validate_prices(prices):
        """
        Normalize prices to a float Series and reject invalid values.

        Args:
            prices (sequence of float or pd.Series): Raw prices

        Returns:
            pd.Series: Float price series named 'Close'
        """
        if isinstance(prices, pd.Series):
            series = prices.astype(float)
        else:
            series = pd.Series(list(prices), dtype=float)
        series.name = 'Close'

        values = series.to_numpy()
        if not np.isfinite(values).all():
            raise InvalidPriceError("Price series contains NaN or infinite values")
        if (values < 0).any():
            raise InvalidPriceError("Price series contains negative values")

        return series

    @abstractmethod
    def generate_signals(self, prices):
        """
        Generate the trading signal for the latest price.

        Args:
            prices (pd.Series): Validated float price series, oldest first

        Returns:
            Signal: BUY, SELL or HOLD
        """
        pass

    def get_parameter_summary(self):
        """
        Get a summary of strategy parameters.

        Returns:
            dict: Dictionary of strategy parameters
        """
        return {
            'strategy_name': self.__class__.__name__,
            'symbol': self.symbol,
            **self.strategy_params
        }
