from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.smart_office.smart_office.storage.json_file_store import JsonFileStore
from src.smart_office.smart_office.storage.seed import ensure_seeded, seed_store


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the SmartOffice JSON data file.")
    parser.add_argument("--force", action="store_true", help="overwrite existing data with the bootstrap dataset")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store = JsonFileStore(settings.DATA_PATH)

    if args.force:
        seed_store(store)
        print(f"OK: Reseeded {store.path}")
    elif ensure_seeded(store):
        print(f"OK: Seeded {store.path}")
    else:
        print(f"OK: {store.path} already seeded (use --force to overwrite)")


if __name__ == "__main__":
    main()
