"""
Run the store trip simulation straight from a source checkout.

    python scripts/run_simulation.py --seed 7
"""

import sys
from pathlib import Path

# Ensure project root is in sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from src.app_layer.main import main


if __name__ == "__main__":
    raise SystemExit(main())
