"""
Signal Generation Command

Computes the SMA crossover signal for a single price series.
Prices are given on the command line or read from a CSV column, and indicator
parameters can be overridden with a JSON configuration file.

Usage:
    generate-signal PRICE [PRICE ...] [--config CONFIG_FILE]
    generate-signal --csv PRICES_FILE [--column Close] [--config CONFIG_FILE]

Examples:
    generate-signal 100 110 120 130 140 130 120 110 100 90 85 80 75 70 72
    generate-signal --csv data/aapl.csv --column Close --symbol AAPL
    generate-signal --csv data/aapl.csv --config data/signal.json
"""

import argparse
import logging
import sys

import pandas as pd

from indicators import IndicatorError, InsufficientDataError, SignalConfig, load_config
from . import get_strategy_class


def read_prices(csv_path, column):
    """
    Read a price column from a CSV file.

    Args:
        csv_path (str): Path to CSV file
        column (str): Column holding the prices

    Returns:
        pd.Series: Prices in file order
    """
    df = pd.read_csv(csv_path)
    if column not in df.columns:
        available = ', '.join(df.columns)
        raise KeyError(f"Column '{column}' not found in {csv_path}. Available columns: {available}")
    return df[column]


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Generate a buy/sell/hold signal from an SMA crossover confirmed by RSI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 100 110 120 130 140 130 120 110 100 90 85 80 75 70 72
  %(prog)s --csv data/aapl.csv --column Close --symbol AAPL
  %(prog)s --csv data/aapl.csv --config data/signal.json
        """
    )

    parser.add_argument(
        'prices',
        nargs='*',
        type=float,
        help='Prices, oldest first'
    )

    parser.add_argument(
        '--csv',
        dest='csv_path',
        help='CSV file to read prices from instead of the command line'
    )

    parser.add_argument(
        '--column',
        default='Close',
        help='CSV column holding the prices (default: Close)'
    )

    parser.add_argument(
        '--config',
        dest='config_file',
        help='JSON file with indicator parameters'
    )

    parser.add_argument(
        '--symbol',
        default='UNKNOWN',
        help='Symbol name used in log messages'
    )

    parser.add_argument(
        '--strategy',
        default='SMACrossoverRSI',
        help='Strategy name (default: SMACrossoverRSI)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.csv_path and args.prices:
        parser.error('give prices on the command line or with --csv, not both')
    if not args.csv_path and not args.prices:
        parser.error('no prices given')

    return args


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        if args.config_file:
            config = SignalConfig.from_dict(load_config(args.config_file))
        else:
            config = SignalConfig()

        prices = read_prices(args.csv_path, args.column) if args.csv_path else args.prices

        strategy_class = get_strategy_class(args.strategy)
        strategy = strategy_class(config=config)
        signal = strategy(args.symbol, prices)

    except IndicatorError as e:
        print()
        print("=" * 80)
        print(f"ERROR: Cannot compute indicators: {e}")
        print("=" * 80)
        if isinstance(e, InsufficientDataError):
            print(f"At least {config.min_prices} prices are needed with the current configuration.")
            print()
        return 1

    except (OSError, KeyError, ValueError) as e:
        print()
        print("=" * 80)
        print(f"ERROR: {e}")
        print("=" * 80)
        print()
        return 1

    print(signal.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
