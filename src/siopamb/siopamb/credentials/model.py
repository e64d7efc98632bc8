from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credential:
    account_id: str
    password_hash: str
