#!/usr/bin/env python
"""
Launcher script for the Unit Catalog command line tool.

This script ensures the src/ directory is on the Python path before launching.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
src_dir = Path(__file__).parent / "src"
sys.path.insert(0, str(src_dir))

# Now import and run the CLI
from unit_catalog.main import main

if __name__ == "__main__":
    sys.exit(main())
