#!/usr/bin/env python3
"""
Project: weather_station
Template: script

Run the interactive weather station without installing the console script:
    python main.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from weather_station.cli import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
