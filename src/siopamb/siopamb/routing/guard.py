from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, url_for

from ..auth.service import AuthService
from .router import View, route

VIEW_ENDPOINTS = {
    View.LOGIN: "login",
    View.SIGN_UP: "signup",
    View.SUBMISSION: "submission",
    View.ADMIN_DASHBOARD: "admin_dashboard",
}


def make_guard(auth_service: AuthService):
    """Decorator factory: tag an endpoint with its View and enforce `route` on every request."""

    def routed(view: View):
        def decorator(fn):
            @wraps(fn)
            def wrapper(*args, **kwargs):
                user = auth_service.current_user()
                decision = route(user, view)
                if decision.redirect:
                    if user is None:
                        flash("Por favor, faça login para continuar.", "warning")
                    return redirect(url_for(VIEW_ENDPOINTS[decision.view]))

                g.current_user = user
                return fn(*args, **kwargs)

            return wrapper

        return decorator

    return routed
