from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Platoon, Rank
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Account
from .repository import AccountRepository

_COLUMNS = "account_id, display_name, `rank`, platoon"


def _to_account(row: dict) -> Account:
    return Account(
        account_id=row["account_id"],
        display_name=row["display_name"],
        rank=Rank(row["rank"]),
        platoon=Platoon(row["platoon"]),
    )


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, account_id: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE account_id=%s", (account_id,))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def get_by_display_name(self, display_name: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE LOWER(display_name)=LOWER(%s)",
                (display_name,),
            )
            row = fetchone(cur)
            return _to_account(row) if row else None

    def create(self, *, account_id: str, display_name: str, rank: Rank, platoon: Platoon) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(account_id, display_name, `rank`, platoon)
                VALUES(%s,%s,%s,%s)
                """,
                (account_id, display_name, rank.value, platoon.value),
            )

    def update(self, *, account_id: str, rank: Rank, platoon: Platoon) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET `rank`=%s, platoon=%s WHERE account_id=%s",
                (rank.value, platoon.value, account_id),
            )
            # rowcount is 0 when nothing changed, so check existence separately
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM users WHERE account_id=%s", (account_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, account_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE account_id=%s", (account_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY seq ASC")
            return [_to_account(r) for r in fetchall(cur)]
