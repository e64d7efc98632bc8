from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import ADMIN_ACCOUNT_ID, ADMIN_USERNAME
from ..core.enums import Platoon, Rank, Role


@dataclass(frozen=True)
class Account:
    """Entidade de domínio: conta de usuário (policial ou administrador).

    Dado puro, sem acesso a banco. `display_name` é o nome de guerra
    já normalizado e nunca muda depois da criação.
    """

    account_id: str
    display_name: str
    rank: Optional[Rank]
    platoon: Optional[Platoon]
    role: Role = Role.OFFICER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


ADMIN_ACCOUNT = Account(
    account_id=ADMIN_ACCOUNT_ID,
    display_name=ADMIN_USERNAME,
    rank=None,
    platoon=None,
    role=Role.ADMIN,
)
