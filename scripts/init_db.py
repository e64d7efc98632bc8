from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "siopamb"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import load_settings

from siopamb.database.bootstrap import apply_schema, list_tables
from siopamb.database.connection import DBConfig


def main() -> None:
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    print(f"OK: Applied schema.sql -> {DBConfig.from_dict(db_config).describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
