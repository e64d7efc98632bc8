"""Create a demo officer account (idempotent).

Usage: python scripts/seed_db.py [nome] [senha]
"""
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "siopamb"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import load_settings

from siopamb.container import build_container
from siopamb.core.enums import Platoon, Rank
from siopamb.core.exceptions import DuplicateNameError


def main(argv: list[str]) -> None:
    settings = load_settings()
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        password_min_length=int(getattr(settings, "PASSWORD_MIN_LENGTH", 4)),
    )

    name = argv[1] if len(argv) > 1 else "Silva"
    password = argv[2] if len(argv) > 2 else "silva123"
    try:
        account = container.account_service.register(
            display_name=name,
            password=password,
            rank=Rank.SOLDADO,
            platoon=Platoon.PRIMEIRO,
        )
        print(f"OK: created {account.display_name} ({account.account_id})")
    except DuplicateNameError:
        print(f"OK: {name} already exists")


if __name__ == "__main__":
    main(sys.argv)
