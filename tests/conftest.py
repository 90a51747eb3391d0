"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from hmsconsole.config.settings import Settings
from hmsconsole.console.logger import HospitalConsole
from hmsconsole.core.types import Role
from hmsconsole.orchestrator.session import SessionCoordinator
from hmsconsole.storage.accounts import AccountDirectory
from hmsconsole.storage.registry import PatientRegistry


if TYPE_CHECKING:
    from collections.abc import Callable


STAFF = {
    "n1": Role.NURSE,
    "doc": Role.DOCTOR,
    "pharm": Role.PHARMACIST,
    "acct": Role.ACCOUNTS,
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host HMS_* variables out of Settings."""
    for name in ("HMS_ADMIN_USERNAME", "HMS_ADMIN_PASSWORD", "HMS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def directory() -> AccountDirectory:
    return AccountDirectory()


@pytest.fixture
def registry() -> PatientRegistry:
    return PatientRegistry()


@pytest.fixture
def session(directory: AccountDirectory, registry: PatientRegistry) -> SessionCoordinator:
    return SessionCoordinator(directory=directory, registry=registry)


@pytest.fixture
def staffed_session(session: SessionCoordinator) -> SessionCoordinator:
    """Session whose directory holds one account per non-admin role (password 'pw')."""
    session.login("admin", "admin123")
    for username, role in STAFF.items():
        session.create_account(username, "pw", role)
    session.logout()
    return session


@pytest.fixture
def login_as(staffed_session: SessionCoordinator) -> Callable[[str], SessionCoordinator]:
    def _login(username: str) -> SessionCoordinator:
        password = "admin123" if username == "admin" else "pw"
        staffed_session.login(username, password)
        return staffed_session

    return _login


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def recording_console() -> HospitalConsole:
    return HospitalConsole(console=Console(file=io.StringIO(), width=120, color_system=None))

