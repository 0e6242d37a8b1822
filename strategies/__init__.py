"""
Trading Strategies

Signal engine, base class and concrete strategy implementations.
"""

from .base import BaseStrategy
from .crossover import SMACrossoverRSI
from .signal_engine import Signal, Crossover, detect_crossover, generate_signal

# Strategy registry for dynamic instantiation
_STRATEGY_REGISTRY = {
    'SMACrossoverRSI': SMACrossoverRSI,
}


def get_strategy_class(name):
    """
    Get strategy class by name.

    Args:
        name (str): Strategy name

    Returns:
        class: Strategy class

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGY_REGISTRY:
        available = ', '.join(_STRATEGY_REGISTRY.keys())
        raise ValueError(f"Strategy '{name}' not found. Available strategies: {available}")
    return _STRATEGY_REGISTRY[name]


__all__ = [
    'BaseStrategy',
    'SMACrossoverRSI',
    'Signal',
    'Crossover',
    'detect_crossover',
    'generate_signal',
    'get_strategy_class',
]
