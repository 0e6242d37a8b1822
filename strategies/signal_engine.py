"""
Signal Engine

Turns a pair of moving-average series into a discrete trading signal:
- Buy when the short MA has just crossed above the long MA and RSI is at or
  below the oversold threshold
- Sell when the short MA has just crossed below the long MA and RSI is at or
  above the overbought threshold
- Hold otherwise

A crossover is read from the last two samples of each series, so the engine
keeps no state between calls.
"""

from enum import Enum, IntEnum
import logging

from indicators import SignalConfig, InsufficientDataError, calculate_rsi_and_macd

logger = logging.getLogger(__name__)


class Signal(IntEnum):
    """Trading signal. Integer values are the position direction."""

    BUY = 1
    HOLD = 0
    SELL = -1

    @property
    def message(self):
        return _SIGNAL_MESSAGES[self]


_SIGNAL_MESSAGES = {
    Signal.BUY: "Buy signal generated!",
    Signal.SELL: "Sell signal generated!",
    Signal.HOLD: "No signal generated.",
}


class Crossover(Enum):
    BULLISH = 'bullish'
    BEARISH = 'bearish'
    NONE = 'none'


def detect_crossover(short_ma, long_ma):
    """
    Classify the move between the last two samples of two MA series.

    Args:
        short_ma (sequence of float): Short-term MA series, oldest first
        long_ma (sequence of float): Long-term MA series, aligned on the same last price

    Returns:
        Crossover: BULLISH if the short MA moved from at-or-below to above the
                   long MA, BEARISH for the mirror move, NONE otherwise

    Raises:
        InsufficientDataError: If either series has fewer than 2 values
    """
    short_ma = list(short_ma)
    long_ma = list(long_ma)
    if len(short_ma) < 2:
        raise InsufficientDataError('short MA crossover', 2, len(short_ma))
    if len(long_ma) < 2:
        raise InsufficientDataError('long MA crossover', 2, len(long_ma))

    prev_short, cur_short = short_ma[-2], short_ma[-1]
    prev_long, cur_long = long_ma[-2], long_ma[-1]

    if cur_short > cur_long and prev_short <= prev_long:
        return Crossover.BULLISH
    if cur_short < cur_long and prev_short >= prev_long:
        return Crossover.BEARISH
    return Crossover.NONE


def generate_signal(prices, short_ma, long_ma, config=None):
    """
    Generate a trading signal from an MA crossover confirmed by RSI.

    Args:
        prices (sequence of float): Full price series, oldest first
        short_ma (sequence of float): Short-term MA series
        long_ma (sequence of float): Long-term MA series
        config (SignalConfig, optional): RSI period and thresholds; defaults apply when omitted

    Returns:
        Signal: BUY, SELL or HOLD

    Raises:
        InsufficientDataError: If either MA series has fewer than 2 values or
                               the price series is shorter than the RSI period
    """
    if config is None:
        config = SignalConfig()

    crossover = detect_crossover(short_ma, long_ma)

    prices = list(prices)
    if len(prices) < config.rsi_period:
        raise InsufficientDataError('RSI', config.rsi_period, len(prices))

    rsi, macd = calculate_rsi_and_macd(prices[-config.rsi_period:], config)
    logger.debug(f"Crossover={crossover.value}, RSI={rsi:.2f}, MACD-signal={macd:.4f}")

    if crossover is Crossover.BULLISH and rsi <= config.oversold:
        return Signal.BUY
    if crossover is Crossover.BEARISH and rsi >= config.overbought:
        return Signal.SELL
    return Signal.HOLD
