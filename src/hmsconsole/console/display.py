"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hmsconsole.core.types import Action, BillStatus


if TYPE_CHECKING:
    from decimal import Decimal

    from rich.console import Console

    from hmsconsole.core.models import (
        AccountInfo,
        BillSummary,
        PatientBasicView,
        PatientBrief,
        PatientSnapshot,
    )
    from hmsconsole.core.types import Role

_STATUS_STYLES = {
    BillStatus.PENDING: "red",
    BillStatus.PARTIALLY_PAID: "yellow",
    BillStatus.FULLY_CLEARED: "green",
}


def format_money(amount: Decimal, currency: str = "$") -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"


def print_employees(console: Console, accounts: list[AccountInfo]) -> None:
    """Print registered employees."""
    table = Table(title="Registered Employees", border_style="blue")
    table.add_column("Username", style="bold")
    table.add_column("Role")
    for account in accounts:
        table.add_row(escape(account.username), account.role.label)
    console.print(table)


def print_patients_brief(console: Console, patients: list[PatientBrief]) -> None:
    """Print the brief patient list."""
    if not patients:
        console.print("  [yellow]⚠[/yellow] No patients registered")
        return
    table = Table(title="Patients", border_style="blue")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name")
    for patient in patients:
        table.add_row(str(patient.id), escape(patient.name))
    console.print(table)


def _basic_text(patient: PatientBasicView) -> Text:
    text = Text()
    text.append("Patient ID: ", style="bold")
    text.append(f"{patient.id}\n")
    text.append("Name: ", style="bold")
    text.append(f"{patient.name}, ")
    text.append("Age: ", style="bold")
    text.append(f"{patient.age}, ")
    text.append("Gender: ", style="bold")
    text.append(f"{patient.gender}\n")
    text.append("Symptoms: ", style="bold")
    text.append(f"{patient.symptoms}\n")
    text.append("Date of admission: ", style="bold")
    text.append(patient.admission_date)
    return text


def print_patient_basic(console: Console, patient: PatientBasicView) -> None:
    console.print(Panel(_basic_text(patient), title="Patient", border_style="blue"))


def print_patient_full(console: Console, patient: PatientSnapshot, currency: str = "$") -> None:
    """Print the full record: demographics, clinical entries and bill."""
    body = _basic_text(patient)
    for heading, entries in (
        ("Diagnoses", patient.diagnoses),
        ("Medical Notes", patient.notes),
        ("Prescriptions", patient.prescriptions),
    ):
        body.append(f"\n\n{heading}:", style="bold cyan")
        if not entries:
            body.append("\n  (none)", style="dim")
        for entry in entries:
            body.append(f"\n  - {entry}")
    console.print(Panel(body, title=f"Patient Record #{patient.id}", border_style="blue"))
    print_bill_summary(console, patient.bill, currency)


def print_bill_summary(console: Console, bill: BillSummary, currency: str = "$") -> None:
    """Print charges, payments, totals and status."""
    table = Table(title="Bill Summary", border_style="blue")
    table.add_column("Type", style="bold")
    table.add_column("Description")
    table.add_column("Amount", justify="right")
    if not bill.charges and not bill.payments:
        table.add_row("", "[dim](no entries)[/dim]", "")
    for charge in bill.charges:
        table.add_row("Charge", escape(charge.label), format_money(charge.amount, currency))
    for payment in bill.payments:
        table.add_row("Payment", escape(payment.label), f"[green]{format_money(payment.amount, currency)}[/green]")
    table.add_section()
    table.add_row("Total Charges", "", format_money(bill.total_charges, currency))
    table.add_row("Total Payments", "", format_money(bill.total_payments, currency))
    table.add_row("Balance", "", f"[bold]{format_money(bill.balance, currency)}[/bold]")
    style = _STATUS_STYLES[bill.status]
    table.add_row("Status", f"[{style}]{bill.status.label}[/{style}]", "")
    console.print(table)


def print_permission_matrix(console: Console, matrix: dict[Role, dict[Action, bool]]) -> None:
    """Print the role x action grid."""
    roles = list(matrix)
    table = Table(title="Role Permissions", border_style="blue")
    table.add_column("Action", style="bold")
    for role in roles:
        table.add_column(role.label, justify="center")
    for action in Action:
        cells = ["[green]✓[/green]" if matrix[role].get(action) else "[dim]·[/dim]" for role in roles]
        table.add_row(action.value.replace("_", " "), *cells)
    console.print(table)
