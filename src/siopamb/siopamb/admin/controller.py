from __future__ import annotations

import io
import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, url_for

from ..common.datetime_utils import format_br
from ..container import Container
from ..core.constants import EXPORT_FILENAME, XLSX_MIMETYPE
from ..core.enums import Platoon, Rank
from ..core.exceptions import DomainError, ValidationError
from ..routing.guard import make_guard
from ..routing.router import View

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    routed = make_guard(container.auth_service)
    app.jinja_env.filters["br_datetime"] = format_br

    @app.route("/admin", endpoint="admin_dashboard")
    @routed(View.ADMIN_DASHBOARD)
    def admin_dashboard():
        reports = container.report_service.list_all()
        stats = container.stats_service.dashboard(reports)
        return render_template(
            "admin/dashboard.html",
            stats=stats,
            reports=list(reversed(reports)),
            active_page="dashboard",
        )

    @app.route("/admin/api/stats", endpoint="admin_api_stats")
    @routed(View.ADMIN_DASHBOARD)
    def admin_api_stats():
        try:
            stats = container.stats_service.dashboard(container.report_service.list_all())
            return jsonify({"success": True, **stats.to_json()})
        except Exception:
            logger.exception("stats query failed")
            return jsonify({"success": False, "message": "Erro ao carregar estatísticas"}), 500

    @app.route("/admin/export.xlsx", endpoint="admin_export")
    @routed(View.ADMIN_DASHBOARD)
    def admin_export():
        try:
            data = container.transfer_service.export_workbook()
        except Exception:
            logger.exception("export failed")
            flash("Erro ao gerar a planilha.", "danger")
            return redirect(url_for("admin_dashboard"))

        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=EXPORT_FILENAME,
        )

    @app.route("/admin/import", methods=["POST"], endpoint="admin_import")
    @routed(View.ADMIN_DASHBOARD)
    def admin_import():
        upload = request.files.get("file")
        try:
            if upload is None or not upload.filename:
                raise ValidationError("Selecione um arquivo .xlsx para importar.")
            count = container.transfer_service.import_workbook(upload.read())
            flash(f"{count} registros importados com sucesso!", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("import failed")
            flash("Erro no sistema ao importar a planilha.", "danger")
        return redirect(url_for("admin_dashboard"))

    @app.route("/admin/users", endpoint="admin_users")
    @routed(View.ADMIN_DASHBOARD)
    def admin_users():
        return render_template(
            "admin/users.html",
            users=container.account_service.list_accounts(),
            active_page="users",
        )

    @app.route("/admin/users/add", methods=["GET", "POST"], endpoint="add_user")
    @routed(View.ADMIN_DASHBOARD)
    def add_user():
        if request.method == "POST":
            try:
                username = request.form.get("username", "")
                password = request.form.get("password", "")
                if not username.strip() or not password:
                    raise ValidationError("Nome de guerra e senha são obrigatórios para novos usuários.")

                account = container.account_service.register(
                    display_name=username,
                    password=password,
                    rank=request.form.get("rank", ""),
                    platoon=request.form.get("platoon", ""),
                )
                flash(f"Usuário {account.display_name} criado.", "success")
                return redirect(url_for("admin_users"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("admin create user failed")
                flash("Erro no sistema ao criar o usuário.", "danger")

        return render_template(
            "admin/user_form.html",
            user=None,
            ranks=list(Rank),
            platoons=list(Platoon),
            active_page="users",
        )

    @app.route("/admin/users/<account_id>/edit", methods=["GET", "POST"], endpoint="edit_user")
    @routed(View.ADMIN_DASHBOARD)
    def edit_user(account_id: str):
        try:
            user = container.account_service.get_account(account_id)
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("admin_users"))

        if request.method == "POST":
            try:
                container.account_service.update_account(
                    account_id,
                    rank=request.form.get("rank") or None,
                    platoon=request.form.get("platoon") or None,
                    password=request.form.get("password") or None,
                )
                flash(f"Usuário {user.display_name} atualizado.", "success")
                return redirect(url_for("admin_users"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("admin update user failed")
                flash("Erro no sistema ao atualizar o usuário.", "danger")

        return render_template(
            "admin/user_form.html",
            user=user,
            ranks=list(Rank),
            platoons=list(Platoon),
            active_page="users",
        )

    @app.route("/admin/users/<account_id>/delete", methods=["POST"], endpoint="delete_user")
    @routed(View.ADMIN_DASHBOARD)
    def delete_user(account_id: str):
        try:
            container.account_service.delete_account(account_id)
            flash("Usuário e seus registros de atividade foram excluídos.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("admin delete user failed")
            flash("Erro no sistema ao excluir o usuário.", "danger")
        return redirect(url_for("admin_users"))

    @app.route("/admin/password", methods=["POST"], endpoint="admin_password")
    @routed(View.ADMIN_DASHBOARD)
    def admin_password():
        try:
            container.auth_service.change_password(
                request.form.get("new_password", ""),
                request.form.get("confirm_password", ""),
            )
            flash("Senha do administrador alterada com sucesso! Faça login novamente.", "success")
            return redirect(url_for("login"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("admin password change failed")
            flash("Erro no sistema ao alterar a senha.", "danger")
        return redirect(url_for("admin_dashboard"))
