"""Rich console output and logging setup for the shell."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from hmsconsole.console.display import (
    print_bill_summary,
    print_employees,
    print_patient_basic,
    print_patient_full,
    print_patients_brief,
    print_permission_matrix,
)


if TYPE_CHECKING:
    from hmsconsole.core.models import (
        AccountInfo,
        BillSummary,
        PatientBasicView,
        PatientBrief,
        PatientSnapshot,
    )
    from hmsconsole.core.types import Action, Role


class HospitalConsole:
    """Rich console interface for menus, records and errors."""

    def __init__(self, console: Console | None = None, verbose: bool = False, currency: str = "$") -> None:
        self.console = console if console is not None else Console()
        self.verbose = verbose
        self.currency = currency

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, admin_username: str) -> None:
        header = Text()
        header.append("Hospital Management System", style="bold blue")
        header.append(" - Records & Billing Console\n\n", style="dim")
        header.append("Default admin account: ", style="bold")
        header.append(admin_username, style="green")
        self.console.print(Panel(header, border_style="blue"))

    def print_menu_title(self, title: str) -> None:
        self.console.print(f"\n[bold]--- {escape(title)} ---[/bold]")

    def print_welcome(self, account: AccountInfo) -> None:
        self.console.print(
            f"[green]✓[/green] Login successful. Welcome, [bold]{escape(account.username)}[/bold] "
            f"({account.role.label})"
        )

    def print_success(self, message: str) -> None:
        self.console.print(f"  [green]✓[/green] {escape(message)}")

    def print_warning(self, message: str) -> None:
        self.console.print(f"  [yellow]⚠[/yellow] {escape(message)}")

    def print_info(self, message: str) -> None:
        self.console.print(escape(message))

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{escape(error)}[/red]", title="[red]Error[/red]", border_style="red")
        )

    def print_employees(self, accounts: list[AccountInfo]) -> None:
        print_employees(self.console, accounts)

    def print_patients_brief(self, patients: list[PatientBrief]) -> None:
        print_patients_brief(self.console, patients)

    def print_patient_basic(self, patient: PatientBasicView) -> None:
        print_patient_basic(self.console, patient)

    def print_patient_full(self, patient: PatientSnapshot) -> None:
        print_patient_full(self.console, patient, self.currency)

    def print_bill_summary(self, bill: BillSummary) -> None:
        print_bill_summary(self.console, bill, self.currency)

    def print_permission_matrix(self, matrix: dict[Role, dict[Action, bool]]) -> None:
        print_permission_matrix(self.console, matrix)
