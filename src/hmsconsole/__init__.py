"""hms-console - in-memory hospital records and billing console.

This package provides:
- Staff accounts with roles and last-admin protection
- Patient registration and append-only clinical records
- Per-patient bills with a derived payment status
- Role-based access control over every operation
- An interactive rich-based shell
"""

from __future__ import annotations

from hmsconsole.config.settings import Settings
from hmsconsole.core.access import AccessController
from hmsconsole.core.billing import Bill
from hmsconsole.core.errors import HMSError
from hmsconsole.core.patient import PatientRecord
from hmsconsole.core.types import Action, BillStatus, Role
from hmsconsole.orchestrator.session import SessionCoordinator
from hmsconsole.storage.accounts import AccountDirectory
from hmsconsole.storage.registry import PatientRegistry


__version__ = "0.1.0"

__all__ = [
    "AccessController",
    "AccountDirectory",
    "Action",
    "Bill",
    "BillStatus",
    "HMSError",
    "PatientRecord",
    "PatientRegistry",
    "Role",
    "SessionCoordinator",
    "Settings",
]
