"""
SMA Crossover Strategy with RSI Confirmation

- Buy when the short SMA crosses above the long SMA and RSI is oversold
- Sell when the short SMA crosses below the long SMA and RSI is overbought
- Hold otherwise
"""

import logging

import pandas as pd

from indicators import SignalConfig, SMA, RSI, moving_average_series
from .base import BaseStrategy
from .signal_engine import generate_signal

logger = logging.getLogger(__name__)


class SMACrossoverRSI(BaseStrategy):
    """
    Moving average crossover strategy confirmed by RSI.

    Parameters:
        short_period (int): Short moving average period (default 3)
        long_period (int): Long moving average period (default 5)
        signal_period (int): MACD signal line period (default 3)
        rsi_period (int): RSI period (default 14)
        overbought (float): RSI level confirming a sell (default 75.0)
        oversold (float): RSI level confirming a buy (default 25.0)
        config (SignalConfig, optional): Use this configuration instead of the
                                         individual parameters
    """

    def __init__(self, config=None, **params):
        if config is None:
            config = SignalConfig(**params)
        elif params:
            raise ValueError("Pass either config or individual parameters, not both")

        super().__init__(**config.to_dict())
        self.config = config

    def generate_signals(self, prices):
        """
        Compute both SMA series and run the signal engine on them.

        Args:
            prices (pd.Series): Validated price series

        Returns:
            Signal: BUY, SELL or HOLD
        """
        values = prices.tolist()
        short_ma = moving_average_series(values, self.config.short_period)
        long_ma = moving_average_series(values, self.config.long_period)

        return generate_signal(values, short_ma, long_ma, self.config)

    def indicator_frame(self, prices):
        """
        Build a DataFrame of the indicators the strategy looks at.

        Args:
            prices (sequence of float or pd.Series): Prices, oldest first

        Returns:
            pd.DataFrame: Close, MA_Short, MA_Long and RSI columns, NaN during warm-up
        """
        close = self._validate_prices(prices)
        symbol = self.symbol or 'UNKNOWN'

        df = pd.DataFrame({'Close': close})
        df['MA_Short'] = SMA(self.config.short_period)(symbol, close)
        df['MA_Long'] = SMA(self.config.long_period)(symbol, close)
        df['RSI'] = RSI(self.config.rsi_period)(symbol, close)

        logger.debug(f"Built indicator frame with {len(df)} rows for {symbol}")
        return df
