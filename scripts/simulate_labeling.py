"""Simulate 5-7 labels per stored sample and upload them."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seeding.runner import main


if __name__ == "__main__":
    sys.exit(main(["simulate", *sys.argv[1:]]))
