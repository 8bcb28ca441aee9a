"""Launch the molar mass calculator console."""

import sys
from pathlib import Path

# Add src to the import path
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from mol_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())
