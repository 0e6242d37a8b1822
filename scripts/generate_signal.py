#!/usr/bin/env python3
"""
Signal Generation Script

Thin wrapper around strategies.cli for running from a source checkout.

Usage:
    python scripts/generate_signal.py PRICE [PRICE ...] [--config CONFIG_FILE]
    python scripts/generate_signal.py --csv PRICES_FILE [--column Close] [--config CONFIG_FILE]
"""

import sys

from strategies.cli import main


if __name__ == "__main__":
    sys.exit(main())
