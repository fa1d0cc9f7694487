#!/usr/bin/env python3
"""
Checkout runner - runs the qrab CLI without installing the package
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from qrab.cli.main import cli

if __name__ == "__main__":
    cli()
