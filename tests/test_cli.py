"""Tests for settings loading and the command-line entry point."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from hmsconsole import cli
from hmsconsole.config.settings import Settings
from hmsconsole.console.logger import HospitalConsole
from hmsconsole.core.types import Role


# ── Tests: Settings ──────────────────────────────────────────────────

def test_settings_defaults(settings):
    assert settings.bootstrap.admin_username == "admin"
    assert settings.bootstrap.admin_password.get_secret_value() == "admin123"
    assert settings.shell.max_patient_id == 1_000_000
    assert settings.shell.currency_symbol == "$"
    assert settings.log_level == "INFO"


def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HMS_ADMIN_USERNAME", "root")
    monkeypatch.setenv("HMS_ADMIN_PASSWORD", "hunter2")
    monkeypatch.setenv("HMS_SHELL__CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("HMS_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.bootstrap.admin_username == "root"
    assert settings.bootstrap.admin_password.get_secret_value() == "hunter2"
    assert settings.shell.currency_symbol == "€"
    assert settings.log_level == "DEBUG"


def test_admin_password_hidden_in_repr(settings):
    assert "admin123" not in repr(settings)


# ── Tests: parser ────────────────────────────────────────────────────

def test_parser_defaults_to_no_command():
    args = cli.build_parser().parse_args([])
    assert args.command is None


def test_parser_rejects_unknown_role():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["permissions", "--role", "janitor"])


# ── Tests: commands ──────────────────────────────────────────────────

def test_show_permissions_single_role(recording_console):
    cli.show_permissions(recording_console, Role.NURSE.value)
    output = recording_console.console.file.getvalue()
    assert "Nurse" in output
    assert "Doctor" not in output
    assert "register patient" in output


def test_show_permissions_all_roles(recording_console):
    cli.show_permissions(recording_console)
    output = recording_console.console.file.getvalue()
    for role in Role:
        assert role.label in output


def test_main_runs_permissions(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(
        cli, "HospitalConsole",
        lambda **kwargs: HospitalConsole(console=Console(file=buffer, width=160, color_system=None), **kwargs),
    )
    cli.main(["permissions", "--role", "accounts"])
    assert "Accounts Manager" in buffer.getvalue()


def test_main_reports_unexpected_errors(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(
        cli, "HospitalConsole",
        lambda **kwargs: HospitalConsole(console=Console(file=buffer, width=160, color_system=None), **kwargs),
    )

    def boom(console, settings):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(cli, "run_shell", boom)
    with pytest.raises(SystemExit) as e:
        cli.main(["run"])
    assert e.value.code == 1
    assert "disk on fire" in buffer.getvalue()


def test_main_keyboard_interrupt_exits_130(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(
        cli, "HospitalConsole",
        lambda **kwargs: HospitalConsole(console=Console(file=buffer, width=160, color_system=None), **kwargs),
    )

    def interrupted(console, settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_shell", interrupted)
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert e.value.code == 130
    assert "Cancelled by user" in buffer.getvalue()
