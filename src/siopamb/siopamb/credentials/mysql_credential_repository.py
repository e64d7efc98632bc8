from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Credential
from .repository import CredentialRepository


class MySQLCredentialRepository(CredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, account_id: str) -> Optional[Credential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT account_id, password_hash FROM user_passwords WHERE account_id=%s",
                (account_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Credential(account_id=row["account_id"], password_hash=row["password_hash"])

    def put(self, *, account_id: str, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_passwords(account_id, password_hash)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash)
                """,
                (account_id, password_hash),
            )

    def delete(self, account_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_passwords WHERE account_id=%s", (account_id,))
            return cur.rowcount > 0
