"""Create the ten simulated labelers in Supabase."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seeding.runner import main


if __name__ == "__main__":
    sys.exit(main(["create-labelers", *sys.argv[1:]]))
