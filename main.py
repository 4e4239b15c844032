#!/usr/bin/env python3
"""
Yosemite Wilderness Permit Availability

Usage:
    python main.py [--start YYYY-MM-DD] [--days N] [--output FILE] [--open-only]

Example:
    COOKIE='...' python main.py --output availability.csv
"""

import sys

from yosemite_permits.cli import main

if __name__ == '__main__':
    sys.exit(main())
