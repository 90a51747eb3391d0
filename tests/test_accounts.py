"""Unit tests for AccountDirectory – bootstrap, uniqueness, deletion and auth."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from hmsconsole.core.errors import (
    AccountNotFoundError,
    AuthFailedError,
    DuplicateUsernameError,
    LastAdminProtectedError,
)
from hmsconsole.core.types import Role
from hmsconsole.storage.accounts import AccountDirectory


def listing(directory: AccountDirectory) -> list[tuple[str, Role]]:
    return [(a.username, a.role) for a in directory.list_accounts()]


# ── Tests: bootstrap ─────────────────────────────────────────────────

def test_bootstrap_seeds_single_admin(directory):
    assert listing(directory) == [("admin", Role.ADMIN)]
    assert directory.admin_count() == 1
    assert directory.authenticate("admin", "admin123").role is Role.ADMIN


def test_bootstrap_admin_is_configurable():
    directory = AccountDirectory(admin_username="root", admin_password=SecretStr("s3cret"))
    assert directory.exists("root")
    assert not directory.exists("admin")
    assert directory.authenticate("root", "s3cret").username == "root"


# ── Tests: create ────────────────────────────────────────────────────

def test_create_and_list_in_storage_order(directory):
    directory.create("n1", "pw", Role.NURSE)
    directory.create("doc", "pw", Role.DOCTOR)
    assert listing(directory) == [("admin", Role.ADMIN), ("n1", Role.NURSE), ("doc", Role.DOCTOR)]


def test_create_duplicate_username_fails_and_leaves_directory_unchanged(directory):
    with pytest.raises(DuplicateUsernameError):
        directory.create("admin", "other", Role.DOCTOR)
    assert listing(directory) == [("admin", Role.ADMIN)]
    assert directory.authenticate("admin", "admin123")


def test_usernames_are_case_sensitive(directory):
    directory.create("Admin", "pw", Role.NURSE)
    assert directory.exists("Admin")
    assert directory.exists("admin")
    assert len(directory) == 2


def test_create_returns_info_without_credential(directory):
    info = directory.create("n1", "pw", Role.NURSE)
    assert "credential" not in info.model_dump()
    assert info.id


# ── Tests: delete ────────────────────────────────────────────────────

def test_delete_unknown_user_fails(directory):
    with pytest.raises(AccountNotFoundError):
        directory.delete("ghost")


def test_delete_last_admin_is_protected(directory):
    with pytest.raises(LastAdminProtectedError):
        directory.delete("admin")
    assert listing(directory) == [("admin", Role.ADMIN)]


def test_delete_admin_allowed_when_another_exists(directory):
    directory.create("admin2", "pw", Role.ADMIN)
    directory.delete("admin")
    assert listing(directory) == [("admin2", Role.ADMIN)]
    with pytest.raises(LastAdminProtectedError):
        directory.delete("admin2")


def test_delete_non_admin(directory):
    directory.create("n1", "pw", Role.NURSE)
    deleted = directory.delete("n1")
    assert deleted.username == "n1"
    assert not directory.exists("n1")


# ── Tests: authenticate / credentials ───────────────────────────────

@pytest.mark.parametrize(("username", "password"), [("admin", "wrong"), ("nobody", "admin123"), ("", "")])
def test_authenticate_fails_uniformly(directory, username, password):
    with pytest.raises(AuthFailedError) as e:
        directory.authenticate(username, password)
    assert str(e.value) == "Invalid username or password."


def test_change_credential(directory):
    directory.change_credential("admin", "newpw")
    assert directory.authenticate("admin", "newpw").username == "admin"
    with pytest.raises(AuthFailedError):
        directory.authenticate("admin", "admin123")


def test_change_credential_unknown_user(directory):
    with pytest.raises(AccountNotFoundError):
        directory.change_credential("ghost", "pw")


def test_get_returns_info(directory):
    assert directory.get("admin").role is Role.ADMIN
    with pytest.raises(AccountNotFoundError):
        directory.get("ghost")


def test_credentials_are_not_logged(directory, caplog):
    with caplog.at_level("DEBUG"):
        directory.create("n1", "topsecret", Role.NURSE)
        directory.change_credential("n1", "evenmoresecret")
        with pytest.raises(AuthFailedError):
            directory.authenticate("n1", "guess")
    assert "secret" not in caplog.text
    assert "guess" not in caplog.text
