from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import Platoon, Rank
from ..core.exceptions import AuthenticationError, DomainError, ValidationError
from ..routing.guard import make_guard
from ..routing.router import View

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    routed = make_guard(container.auth_service)

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    @routed(View.LOGIN)
    def login():
        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                user = container.auth_service.login(username, password)
                target = "admin_dashboard" if user.is_admin else "submission"
                return redirect(url_for(target))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("login failed")
                flash("Erro no sistema ao entrar. Tente novamente.", "danger")

        return render_template("login.html")

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    @routed(View.SIGN_UP)
    def signup():
        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            rank = request.form.get("rank", "")
            platoon = request.form.get("platoon", "")

            try:
                if not all(v.strip() for v in (username, password, rank, platoon)):
                    raise ValidationError("Todos os campos são obrigatórios.")

                container.account_service.register(
                    display_name=username,
                    password=password,
                    rank=rank,
                    platoon=platoon,
                )
                flash("Cadastro realizado com sucesso! Faça login para continuar.", "success")
                return redirect(url_for("login"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("signup failed")
                flash("Erro no sistema ao cadastrar. Tente novamente.", "danger")

        return render_template("signup.html", ranks=list(Rank), platoons=list(Platoon))

    @app.route("/logout", endpoint="logout")
    def logout():
        container.auth_service.logout()
        flash("Sessão encerrada.", "info")
        return redirect(url_for("login"))
