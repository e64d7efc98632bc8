"""Decisão de navegação por papel.

Three session states (anonymous, officer, administrator) against four views.
`route` is pure: the Flask layer calls it on every request and follows the
redirect when there is one.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..auth.service import SessionUser


class View(str, Enum):
    LOGIN = "login"
    SIGN_UP = "signup"
    SUBMISSION = "submission"
    ADMIN_DASHBOARD = "admin_dashboard"


PUBLIC_VIEWS = frozenset({View.LOGIN, View.SIGN_UP})


@dataclass(frozen=True)
class RouteDecision:
    view: View
    redirect: bool = False


def route(user: Optional[SessionUser], requested: View) -> RouteDecision:
    if user is None:
        if requested not in PUBLIC_VIEWS:
            return RouteDecision(View.LOGIN, redirect=True)
        return RouteDecision(requested)

    if user.is_admin:
        if requested != View.ADMIN_DASHBOARD:
            return RouteDecision(View.ADMIN_DASHBOARD, redirect=True)
        return RouteDecision(requested)

    if requested == View.ADMIN_DASHBOARD or requested in PUBLIC_VIEWS:
        return RouteDecision(View.SUBMISSION, redirect=True)
    return RouteDecision(requested)
