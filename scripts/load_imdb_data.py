"""Upload the first 1,000 IMDB reviews from data/IMDB Dataset.csv."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seeding.runner import main

DATA_PATH = ROOT / "data" / "IMDB Dataset.csv"


if __name__ == "__main__":
    sys.exit(main(["load-samples", "--csv", str(DATA_PATH), *sys.argv[1:]]))
