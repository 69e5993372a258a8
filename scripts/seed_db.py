from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geo_attendance.geo_attendance.core.constants import DEFAULT_PRN_COUNT, DEFAULT_PRN_PREFIX
from src.geo_attendance.geo_attendance.database.bootstrap import default_prns, seed_students


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the student registry with a PRN range.")
    parser.add_argument("--prefix", default=DEFAULT_PRN_PREFIX)
    parser.add_argument("--count", type=int, default=DEFAULT_PRN_COUNT)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    inserted = seed_students(db_config, prns=default_prns(args.prefix, args.count))
    print(
        f"OK: Seeded {inserted} students -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
