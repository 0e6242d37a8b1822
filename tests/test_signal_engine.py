"""Tests for crossover detection and signal generation."""

import pytest

from indicators import (
    InsufficientDataError,
    SignalConfig,
    moving_average_series,
    relative_strength_index,
)
from strategies import Crossover, Signal, detect_crossover, generate_signal


def ma_pair(prices, config=None):
    config = config or SignalConfig()
    return (
        moving_average_series(prices, config.short_period),
        moving_average_series(prices, config.long_period),
    )


class TestSignal:
    """Tests for the Signal enum."""

    def test_integer_codes(self):
        assert int(Signal.BUY) == 1
        assert int(Signal.SELL) == -1
        assert int(Signal.HOLD) == 0

    def test_messages(self):
        assert Signal.BUY.message == "Buy signal generated!"
        assert Signal.SELL.message == "Sell signal generated!"
        assert Signal.HOLD.message == "No signal generated."


class TestDetectCrossover:
    """Tests for crossover detection."""

    def test_bullish(self):
        assert detect_crossover([1.0, 3.0], [2.0, 2.5]) is Crossover.BULLISH

    def test_bearish(self):
        assert detect_crossover([3.0, 1.0], [2.0, 2.5]) is Crossover.BEARISH

    def test_bullish_from_touching(self):
        """Previous samples being equal still counts as a crossover."""
        assert detect_crossover([1.0, 2.0], [1.0, 1.5]) is Crossover.BULLISH

    def test_bearish_from_touching(self):
        assert detect_crossover([1.0, 1.0], [1.0, 1.5]) is Crossover.BEARISH

    def test_equal_now_is_not_a_crossover(self):
        assert detect_crossover([1.0, 2.0], [1.5, 2.0]) is Crossover.NONE

    def test_no_cross(self):
        assert detect_crossover([3.0, 4.0], [1.0, 2.0]) is Crossover.NONE
        assert detect_crossover([1.0, 2.0], [3.0, 4.0]) is Crossover.NONE

    def test_uses_last_two_samples(self):
        assert detect_crossover([5.0, 0.0, 1.0, 3.0], [0.0, 5.0, 2.0, 2.5]) is Crossover.BULLISH

    @pytest.mark.parametrize("short_ma,long_ma", [
        ([1.0], [1.0, 2.0]),
        ([1.0, 2.0], [1.0]),
        ([], []),
    ])
    def test_insufficient_data(self, short_ma, long_ma):
        with pytest.raises(InsufficientDataError) as exc_info:
            detect_crossover(short_ma, long_ma)

        assert exc_info.value.required == 2

    def test_swapping_series_swaps_direction(self):
        assert detect_crossover([2.0, 2.5], [1.0, 3.0]) is Crossover.BEARISH
        assert detect_crossover([2.0, 2.5], [3.0, 1.0]) is Crossover.BULLISH


class TestPeakScenario:
    """Rise to 140 then fall to 90 with short window 3 and long window 5."""

    def test_crossover_point(self, peak_prices):
        short_ma, long_ma = ma_pair(peak_prices)
        # Align the short series on the same end prices as the long series
        short_ma = short_ma[len(short_ma) - len(long_ma):]

        crossovers = {
            end: detect_crossover(short_ma[:end - 3], long_ma[:end - 3])
            for end in range(5, len(peak_prices))
        }

        assert [end for end, c in crossovers.items() if c is not Crossover.NONE] == [7]
        assert crossovers[7] is Crossover.BEARISH
        assert short_ma[3] == pytest.approx(120.0)
        assert long_ma[3] == pytest.approx(126.0)

    def test_no_crossover_at_latest_price(self, peak_prices):
        assert detect_crossover(*ma_pair(peak_prices)) is Crossover.NONE

    def test_rsi_period_longer_than_series(self, peak_prices):
        """Ten prices cannot feed a 14-period RSI; the engine refuses instead of holding."""
        short_ma, long_ma = ma_pair(peak_prices)

        with pytest.raises(InsufficientDataError) as exc_info:
            generate_signal(peak_prices, short_ma, long_ma)

        assert exc_info.value.indicator == 'RSI'
        assert exc_info.value.required == 14
        assert exc_info.value.available == 10

    def test_shorter_rsi_period_holds(self, peak_prices):
        config = SignalConfig(rsi_period=5)
        short_ma, long_ma = ma_pair(peak_prices, config)

        assert generate_signal(peak_prices, short_ma, long_ma, config) is Signal.HOLD


class TestGenerateSignal:
    """Tests for crossover plus RSI confirmation."""

    def test_buy(self, buy_prices):
        short_ma, long_ma = ma_pair(buy_prices)

        assert short_ma[-1] == pytest.approx(93.0)
        assert long_ma[-1] == pytest.approx(92.4)
        assert generate_signal(buy_prices, short_ma, long_ma) is Signal.BUY

    def test_sell(self, sell_prices):
        short_ma, long_ma = ma_pair(sell_prices)

        assert short_ma[-1] == pytest.approx(107.0)
        assert long_ma[-1] == pytest.approx(107.6)
        assert generate_signal(sell_prices, short_ma, long_ma) is Signal.SELL

    def test_buy_needs_oversold_rsi(self, buy_prices):
        config = SignalConfig(oversold=5.0)
        short_ma, long_ma = ma_pair(buy_prices, config)

        assert generate_signal(buy_prices, short_ma, long_ma, config) is Signal.HOLD

    def test_sell_needs_overbought_rsi(self, sell_prices):
        config = SignalConfig(overbought=95.0)
        short_ma, long_ma = ma_pair(sell_prices, config)

        assert generate_signal(sell_prices, short_ma, long_ma, config) is Signal.HOLD

    def test_rsi_at_oversold_threshold_confirms(self, buy_prices):
        rsi = relative_strength_index(buy_prices[-14:], 14)
        config = SignalConfig(oversold=rsi)
        short_ma, long_ma = ma_pair(buy_prices, config)

        assert generate_signal(buy_prices, short_ma, long_ma, config) is Signal.BUY

    def test_rsi_at_overbought_threshold_confirms(self, sell_prices):
        rsi = relative_strength_index(sell_prices[-14:], 14)
        config = SignalConfig(overbought=rsi)
        short_ma, long_ma = ma_pair(sell_prices, config)

        assert generate_signal(sell_prices, short_ma, long_ma, config) is Signal.SELL

    def test_oversold_rsi_without_crossover_holds(self, buy_prices):
        prices = buy_prices[:-1] + [89.0]
        short_ma, long_ma = ma_pair(prices)

        assert generate_signal(prices, short_ma, long_ma) is Signal.HOLD

    def test_swapping_series_swaps_signal(self, buy_prices, sell_prices):
        """With both thresholds always confirming, swapping the MA series turns buys into sells."""
        config = SignalConfig(overbought=0.0, oversold=100.0)

        for prices, expected in ((buy_prices, Signal.BUY), (sell_prices, Signal.SELL)):
            short_ma, long_ma = ma_pair(prices, config)

            assert generate_signal(prices, short_ma, long_ma, config) is expected
            assert generate_signal(prices, long_ma, short_ma, config) == Signal(-expected)

    def test_short_ma_series(self, buy_prices):
        with pytest.raises(InsufficientDataError):
            generate_signal(buy_prices, [1.0], [1.0, 2.0])

    def test_idempotent(self, buy_prices):
        short_ma, long_ma = ma_pair(buy_prices)

        first = generate_signal(buy_prices, short_ma, long_ma)
        second = generate_signal(buy_prices, short_ma, long_ma)

        assert first is second is Signal.BUY
