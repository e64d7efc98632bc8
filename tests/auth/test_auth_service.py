from __future__ import annotations

import pytest

from siopamb.core.enums import Role
from siopamb.core.exceptions import (
    AuthenticationError,
    NotAuthenticatedError,
    PasswordMismatchError,
    PasswordTooShortError,
)
from siopamb.routing.router import View, route


def test_login_is_case_insensitive(container, officer):
    user = container.auth_service.login("JOAO", "segredo")

    assert user.account_id == officer.account_id
    assert user.role == Role.OFFICER
    assert container.auth_service.current_user() == user


def test_unknown_user_and_wrong_password_fail_the_same_way(container, officer):
    with pytest.raises(AuthenticationError) as unknown:
        container.auth_service.login("ninguem", "segredo")
    with pytest.raises(AuthenticationError) as wrong:
        container.auth_service.login("joao", "errada")

    assert str(unknown.value) == str(wrong.value)
    assert container.auth_service.current_user() is None


def test_admin_logs_in_with_default_password(container):
    user = container.auth_service.login("ADM", "adm")

    assert user.is_admin
    assert user.account_id == "admin"


def test_admin_stored_credential_replaces_default(container):
    container.credential_service.set_password("admin", "forte123")

    with pytest.raises(AuthenticationError):
        container.auth_service.login("adm", "adm")
    assert container.auth_service.login("adm", "forte123").is_admin


def test_logout_returns_to_anonymous_and_is_idempotent(container, officer):
    container.auth_service.login("joao", "segredo")

    container.auth_service.logout()
    container.auth_service.logout()

    user = container.auth_service.current_user()
    assert user is None
    assert route(user, View.SUBMISSION).view == View.LOGIN


def test_change_password_requires_matching_confirmation(container, officer):
    container.auth_service.login("joao", "segredo")

    with pytest.raises(PasswordMismatchError):
        container.auth_service.change_password("novasenha", "outrasenha")


def test_change_password_enforces_minimum_length(container, officer):
    container.auth_service.login("joao", "segredo")

    with pytest.raises(PasswordTooShortError):
        container.auth_service.change_password("abc", "abc")


def test_change_password_requires_session(container, officer):
    with pytest.raises(NotAuthenticatedError):
        container.auth_service.change_password("novasenha", "novasenha")


def test_change_password_replaces_secret_and_ends_session(container, officer):
    container.auth_service.login("joao", "segredo")

    container.auth_service.change_password("novasenha", "novasenha")

    assert container.auth_service.current_user() is None
    with pytest.raises(AuthenticationError):
        container.auth_service.login("joao", "segredo")
    assert container.auth_service.login("joao", "novasenha").account_id == officer.account_id


def test_tampered_session_payload_is_anonymous(container, session_backing):
    session_backing["auth"] = {"account_id": "x", "display_name": "X", "role": "root"}

    assert container.auth_service.current_user() is None
    assert session_backing == {}


def test_new_officer_can_reach_submission_view(container):
    container.account_service.register(display_name="joao", password="segredo", rank="Soldado PM", platoon="1º pelotão")

    user = container.auth_service.login("Joao", "segredo")

    decision = route(user, View.SUBMISSION)
    assert decision.view == View.SUBMISSION
    assert not decision.redirect


def test_session_of_deleted_account_cannot_set_a_password(container, officer, repos, session_backing):
    container.auth_service.login("joao", "segredo")
    container.account_service.delete_account(officer.account_id)

    with pytest.raises(NotAuthenticatedError):
        container.auth_service.change_password("novasenha", "novasenha")

    assert officer.account_id not in repos["credentials_repo"].rows
    assert session_backing == {}


def test_session_of_deleted_account_is_anonymous(container, officer):
    container.auth_service.login("joao", "segredo")
    container.account_service.delete_account(officer.account_id)

    user = container.auth_service.current_user()

    assert user is None
    assert route(user, View.SUBMISSION).view == View.LOGIN


def test_current_user_reflects_admin_edits(container, officer):
    container.auth_service.login("joao", "segredo")
    container.account_service.update_account(officer.account_id, rank="Cabo PM")

    assert container.auth_service.current_user().rank.value == "Cabo PM"
