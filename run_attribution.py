"""CLI entry point for Held / Not Held return attribution.

Usage:
    python run_attribution.py --decisions decisions.json --returns returns.csv
    python run_attribution.py --decisions d.csv --returns r.json --asset-class crypto --ticker BTC
    python run_attribution.py --decisions d.json --returns r.csv --strategy momentum --as-of 2024-03-01
"""

import sys

from src.return_attribution.cli import main

if __name__ == "__main__":
    sys.exit(main(["attribute", *sys.argv[1:]]))
