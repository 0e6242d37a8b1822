"""
Oscillator Indicators

Momentum and trend-strength indicators computed over a single window of
prices: the Relative Strength Index and the MACD histogram (MACD line minus
its signal line).

The short EMA used for MACD is not a textbook exponential recurrence. At each
step it is recomputed from a sliding buffer of the most recent raw prices,
seeded from the oldest price in that buffer, so it tracks recent prices more
closely than the long EMA does.

Example:
    >>> rsi, macd = calculate_rsi_and_macd(prices[-14:])
"""

from collections import deque
import logging

import pandas as pd

from .config import SignalConfig
from .exceptions import InsufficientDataError
from .technical import EMA

logger = logging.getLogger(__name__)

RSI_CEILING = 100.0


def relative_strength_index(window, period=14):
    """
    Compute the Relative Strength Index over the first `period` prices.

    Period-over-period differences are split into gains and losses, each
    averaged over `period`. When the average loss is zero the RSI is clamped
    to 100 instead of dividing by zero.

    Args:
        window (sequence of float): Prices, oldest first
        period (int): RSI period (default 14)

    Returns:
        float: RSI between 0 and 100

    Raises:
        InsufficientDataError: If the window holds fewer than `period` prices
    """
    prices = [float(p) for p in window]
    if len(prices) < period:
        raise InsufficientDataError('RSI', period, len(prices))

    sum_gain = 0.0
    sum_loss = 0.0
    for prev_price, price in zip(prices[:period - 1], prices[1:period]):
        diff = price - prev_price
        if diff > 0:
            sum_gain += diff
        else:
            sum_loss += abs(diff)

    avg_gain = sum_gain / period
    avg_loss = sum_loss / period

    if avg_loss == 0:
        logger.debug(f"RSI average loss is zero over {period} periods, clamping to {RSI_CEILING}")
        return RSI_CEILING

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def RSI(N):
    """
    Relative Strength Index (RSI) indicator factory.

    Each value is the RSI of the N prices ending at that point, using the same
    rule as relative_strength_index(): gains and losses averaged over N, with
    the result clamped to 100 when there are no losses.

    Args:
        N (int): The number of periods for the RSI calculation

    Returns:
        callable: A function that takes symbol and pandas Series and returns the N-period RSI

    Example:
        >>> rsi_14 = RSI(14)
        >>> df['RSI'] = rsi_14('AAPL', df['Close'])
    """
    def compute_rsi(symbol, series):
        """
        Compute the rolling N-period Relative Strength Index.

        Args:
            symbol (str): Stock ticker symbol (e.g., 'AAPL')
            series (pd.Series): Time series data (typically price data)

        Returns:
            pd.Series: N-period RSI (values between 0 and 100), NaN during warm-up
        """
        if not isinstance(series, pd.Series):
            raise TypeError(f"Expected pandas Series, got {type(series)}")

        rsi = series.astype(float).rolling(window=N).apply(
            lambda window: relative_strength_index(window, N), raw=True
        )
        logger.debug(f"Computed {N}-period RSI for {symbol} with {len(rsi)} data points")

        return rsi

    compute_rsi.__name__ = f'RSI_{N}'
    compute_rsi.period = N
    compute_rsi.indicator_type = 'RSI'

    return compute_rsi


def macd_histogram(window, short_period=3, long_period=5, signal_period=3):
    """
    Compute MACD minus its signal line over a window of prices.

    Both EMA trackers start from the first price of the window. The value is
    returned as soon as `signal_period` MACD values have accumulated; any
    prices after that point are not examined. If the window runs out first
    the result is 0.0.

    Args:
        window (sequence of float): Prices, oldest first
        short_period (int): Short EMA length, also the raw price buffer size
        long_period (int): Long EMA length
        signal_period (int): Number of MACD values averaged into the signal line

    Returns:
        float: Current MACD minus the signal line, or 0.0

    Raises:
        InsufficientDataError: If the window is empty
    """
    prices = pd.Series(list(window), dtype=float)
    if prices.empty:
        raise InsufficientDataError('MACD', 1, 0)

    long_ema = EMA(long_period)('MACD', prices)
    short_ema = EMA(short_period)
    short_buffer = deque([prices.iloc[0]], maxlen=short_period)
    macd_values = deque(maxlen=signal_period)

    for i in range(1, len(prices)):
        short_buffer.append(prices.iloc[i])
        if len(short_buffer) < short_period:
            continue

        # Re-seed from the oldest buffered price on every step
        short_value = short_ema('MACD', pd.Series(list(short_buffer))).iloc[-1]
        macd_values.append(short_value - long_ema.iloc[i])

        if len(macd_values) == signal_period:
            signal_line = sum(macd_values) / signal_period
            return float(macd_values[-1] - signal_line)

    logger.debug(f"MACD signal line never filled over {len(prices)} prices, returning 0.0")
    return 0.0


def calculate_rsi_and_macd(window, config=None):
    """
    Compute RSI and MACD-minus-signal for one window of prices.

    Args:
        window (sequence of float): At least `config.rsi_period` prices
        config (SignalConfig, optional): Indicator periods; defaults apply when omitted

    Returns:
        tuple: (rsi, macd_minus_signal)
    """
    if config is None:
        config = SignalConfig()

    rsi = relative_strength_index(window, config.rsi_period)
    macd = macd_histogram(
        window,
        short_period=config.short_period,
        long_period=config.long_period,
        signal_period=config.signal_period,
    )
    logger.debug(f"RSI={rsi:.2f}, MACD-signal={macd:.4f} over {len(window)} prices")
    return rsi, macd
