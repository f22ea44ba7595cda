"""
Entry-point launcher for the pin input demo.

Run from the repository root:
    python run.py

Or from any location:
    python /path/to/run.py
"""
import sys
import os

# Ensure src/ is on the path when the package is not installed
_HERE = os.path.dirname(os.path.abspath(__file__))
_SRC = os.path.join(_HERE, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from pin_input.main import main

if __name__ == "__main__":
    sys.exit(main())
