from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..routing.guard import make_guard
from ..routing.router import View
from .fields import FIELD_SPECS, parse_report_form

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    routed = make_guard(container.auth_service)

    @app.route("/dashboard", methods=["GET", "POST"], endpoint="submission")
    @routed(View.SUBMISSION)
    def submission():
        if request.method == "POST":
            try:
                fields = parse_report_form(request.form)
                container.report_service.submit(fields, g.current_user.account_id)
                # The officer is signed out after each report, as on the paper form.
                container.auth_service.logout()
                flash("Atividade registrada com sucesso! Faça login para registrar outra.", "success")
                return redirect(url_for("login"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("report submission failed")
                flash("Erro no sistema ao registrar a atividade. Tente novamente.", "danger")

        return render_template(
            "submission.html",
            field_specs=FIELD_SPECS,
            values=request.form if request.method == "POST" else {},
            min_password_length=container.credential_service.min_length,
        )

    @app.route("/dashboard/password", methods=["POST"], endpoint="officer_password")
    @routed(View.SUBMISSION)
    def officer_password():
        try:
            container.auth_service.change_password(
                request.form.get("new_password", ""),
                request.form.get("confirm_password", ""),
            )
            flash("Senha alterada com sucesso! Faça login novamente.", "success")
            return redirect(url_for("login"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("password change failed")
            flash("Erro no sistema ao alterar a senha.", "danger")
        return redirect(url_for("submission"))
