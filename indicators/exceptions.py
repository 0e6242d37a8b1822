"""
Indicator Exceptions

Faults raised by the indicator calculators and the signal engine when they
are asked to work on data that cannot produce a meaningful value.
"""


class IndicatorError(ValueError):
    """Base class for all indicator faults."""


class InsufficientDataError(IndicatorError):
    """
    Raised when an indicator is requested on a window shorter than it needs.

    Attributes:
        indicator (str): Name of the indicator that could not be computed
        required (int): Minimum number of data points needed
        available (int): Number of data points actually supplied
    """

    def __init__(self, indicator, required, available):
        self.indicator = indicator
        self.required = required
        self.available = available
        super().__init__(
            f"{indicator} needs at least {required} data points, got {available}"
        )


class InvalidPriceError(IndicatorError):
    """Raised when a price series contains negative or non-finite values."""
