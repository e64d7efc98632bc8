from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Platoon, Rank
from .model import Account


class AccountRepository(Protocol):
    """Interface do diretório de contas.

    Note (DIP): services depend on this protocol, never on a concrete DB.
    """

    def get_by_id(self, account_id: str) -> Optional[Account]:
        raise NotImplementedError

    def get_by_display_name(self, display_name: str) -> Optional[Account]:
        """Case-insensitive lookup."""
        raise NotImplementedError

    def create(self, *, account_id: str, display_name: str, rank: Rank, platoon: Platoon) -> None:
        raise NotImplementedError

    def update(self, *, account_id: str, rank: Rank, platoon: Platoon) -> bool:
        raise NotImplementedError

    def delete_by_id(self, account_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Account]:
        """Insertion order."""
        raise NotImplementedError
