"""Command-line interface for hms-console."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from hmsconsole.config.settings import Settings
from hmsconsole.console.logger import HospitalConsole
from hmsconsole.console.shell import HospitalShell
from hmsconsole.core.access import AccessController
from hmsconsole.core.types import Role
from hmsconsole.orchestrator.session import SessionCoordinator


if TYPE_CHECKING:
    from collections.abc import Sequence


def run_shell(console: HospitalConsole, settings: Settings) -> None:
    """Start the interactive login/menu shell."""
    console.setup_logging(settings.log_level)
    session = SessionCoordinator.from_settings(settings)
    HospitalShell(session, console, settings).run()


def show_permissions(console: HospitalConsole, role: str | None = None) -> None:
    """Print the permission matrix, optionally for one role."""
    matrix = AccessController().matrix()
    if role is not None:
        selected = Role(role)
        matrix = {selected: matrix[selected]}
    console.print_permission_matrix(matrix)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hms-console", description="In-memory hospital records and billing console"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_cmd = subparsers.add_parser("run", help="Start the interactive shell (default)")
    run_cmd.add_argument("--verbose", "-v", action="store_true", help="Show log output")

    perms = subparsers.add_parser("permissions", help="Show which role may perform which action")
    perms.add_argument("--role", choices=[r.value for r in Role], help="Only show one role")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    console = HospitalConsole(
        verbose=getattr(args, "verbose", False), currency=settings.shell.currency_symbol
    )

    try:
        if args.command == "permissions":
            show_permissions(console, args.role)
        else:
            run_shell(console, settings)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
