"""Pytest configuration."""

import sys
from pathlib import Path

# Make the package importable without installation
root_path = Path(__file__).parent
sys.path.insert(0, str(root_path))
