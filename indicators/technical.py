"""
Technical Indicators Module

This module provides moving-average indicators over price data.
The factories return callables that take a symbol and a pandas Series, which
is how the strategies and the oscillators compute indicator columns. The plain
functions wrap them for a single window or a list of prices.

Example:
    >>> sma_5 = SMA(5)
    >>> ma = sma_5('AAPL', prices['Close'])
    >>> simple_moving_average([100.0, 110.0, 120.0])
    110.0
"""

import pandas as pd
import logging

from .exceptions import InsufficientDataError

logger = logging.getLogger(__name__)


def simple_moving_average(window):
    """
    Arithmetic mean of a window of prices.

    Args:
        window (sequence of float): Non-empty window of prices

    Returns:
        float: sum(window) / len(window)

    Raises:
        InsufficientDataError: If the window is empty
    """
    prices = pd.Series(list(window), dtype=float)
    if prices.empty:
        raise InsufficientDataError('SMA', 1, 0)
    return float(prices.mean())


def moving_average_series(prices, window):
    """
    Slide a window of `window` prices across the series and average each one.

    Args:
        prices (sequence of float): Price series, oldest first
        window (int): Window length

    Returns:
        list: len(prices) - window + 1 SMA values, oldest first

    Raises:
        ValueError: If window is less than 1
        InsufficientDataError: If the series is shorter than the window
    """
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")

    series = pd.Series(list(prices), dtype=float)
    if len(series) < window:
        raise InsufficientDataError(f'SMA({window})', window, len(series))

    # Drop the warm-up NaNs so the series starts at the first full window
    return SMA(window)('series', series).iloc[window - 1:].tolist()


def SMA(N):
    """
    Simple Moving Average (SMA) indicator factory.

    This function returns a callable that computes the N-period simple moving average.

    Args:
        N (int): The number of periods for the moving average

    Returns:
        callable: A function that takes symbol and pandas Series and returns the N-period SMA

    Example:
        >>> # Create a 5-period SMA calculator
        >>> sma_5 = SMA(5)
        >>>
        >>> # Apply it to price data
        >>> df['MA_5'] = sma_5('AAPL', df['Close'])
    """
    def compute_sma(symbol, series):
        """
        Compute the N-period simple moving average.

        Args:
            symbol (str): Stock ticker symbol (e.g., 'AAPL')
            series (pd.Series): Time series data (typically price data)

        Returns:
            pd.Series: N-period simple moving average, NaN during warm-up
        """
        if not isinstance(series, pd.Series):
            raise TypeError(f"Expected pandas Series, got {type(series)}")

        result = series.rolling(window=N).mean()
        logger.debug(f"Computed {N}-period SMA for {symbol} with {len(result)} data points")

        return result

    compute_sma.__name__ = f'SMA_{N}'
    compute_sma.period = N
    compute_sma.indicator_type = 'SMA'

    return compute_sma


def EMA(N):
    """
    Exponential Moving Average (EMA) indicator factory.

    The first value is the first price; each later value is
    alpha * price + (1 - alpha) * previous, with alpha = 2 / (N + 1).

    Args:
        N (int): The number of periods for the moving average

    Returns:
        callable: A function that takes symbol and pandas Series and returns the N-period EMA

    Example:
        >>> ema_5 = EMA(5)
        >>> df['EMA_5'] = ema_5('AAPL', df['Close'])
    """
    def compute_ema(symbol, series):
        """
        Compute the N-period exponential moving average.

        Args:
            symbol (str): Stock ticker symbol (e.g., 'AAPL')
            series (pd.Series): Time series data (typically price data)

        Returns:
            pd.Series: N-period exponential moving average
        """
        if not isinstance(series, pd.Series):
            raise TypeError(f"Expected pandas Series, got {type(series)}")

        result = series.ewm(span=N, adjust=False).mean()
        logger.debug(f"Computed {N}-period EMA for {symbol} with {len(result)} data points")

        return result

    compute_ema.__name__ = f'EMA_{N}'
    compute_ema.period = N
    compute_ema.indicator_type = 'EMA'

    return compute_ema


if __name__ == "__main__":
    import numpy as np

    print("=" * 60)
    print("Testing Technical Indicators")
    print("=" * 60)

    prices = pd.Series(
        100 + np.cumsum(np.random.randn(60) * 2),
        index=pd.date_range('2024-01-01', periods=60, freq='D'),
        name='Close'
    )

    comparison = pd.DataFrame({
        'Price': prices,
        'SMA_3': SMA(3)('DEMO', prices),
        'SMA_5': SMA(5)('DEMO', prices),
        'EMA_5': EMA(5)('DEMO', prices),
    })

    print("\nLast 10 days:")
    print(comparison.tail(10))
