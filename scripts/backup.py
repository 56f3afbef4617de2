"""Backup the JSON data file.

Note: Copies DATA_PATH into ./backups with a timestamp suffix.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_path = Path(settings.DATA_PATH)
    if not data_path.exists():
        raise SystemExit(f"Data file not found: {data_path}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{data_path.stem}_{ts}{data_path.suffix}"
    shutil.copy2(data_path, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
