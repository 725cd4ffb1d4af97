"""
Application entry point for the machine learning demos.

Usage:
    python main.py issues train
    python main.py sentiment
    python main.py taxi
"""

from __future__ import annotations

import sys

from mlpipelines.cli import main

if __name__ == "__main__":
    sys.exit(main())
