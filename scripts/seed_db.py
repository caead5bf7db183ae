from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_management.employee_management.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Fill empty tables with demo data.")
    parser.add_argument("--reseed", action="store_true", help="clear every table first")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    seeds = build_container(db_config=db_config, settings=settings).seed_service

    status = seeds.reseed() if args.reseed else seeds.seed()
    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(departments={status.departments}, employees={status.employees}, attendances={status.attendances}, "
        f"performance_metrics={status.performance_metrics}, users={status.users})"
    )


if __name__ == "__main__":
    main()
