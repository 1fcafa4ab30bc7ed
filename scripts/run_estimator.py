#!/usr/bin/env python
"""
Run water hammer estimator: parse form values, simulate, render chart

Usage:
    python scripts/run_estimator.py [--diameter 4] [--flowRate 100] [--output out/transient.png]
    python -m hammersim.cli  # Alternative (if installed as package)
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hammersim.cli import main


if __name__ == "__main__":
    sys.exit(main())
