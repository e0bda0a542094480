"""
Day layout entry point.
Run this file with a JSON event list to print the computed day-view geometry.

    python layout_day.py events.json --date 2025-11-18 --item-width 90
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from dayview.cli import main

if __name__ == "__main__":
    sys.exit(main())
