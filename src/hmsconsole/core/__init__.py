"""Core module - domain types, models, billing and access control."""

from __future__ import annotations

from hmsconsole.core.access import PERMISSIONS, AccessController
from hmsconsole.core.billing import Bill
from hmsconsole.core.errors import (
    AccountNotFoundError,
    AuthFailedError,
    DuplicateUsernameError,
    HMSError,
    InvalidPatientDataError,
    LastAdminProtectedError,
    NotAuthenticatedError,
    NotFoundError,
    PatientNotFoundError,
    PermissionDeniedError,
    SelfDeletionForbiddenError,
)
from hmsconsole.core.models import (
    Account,
    AccountInfo,
    BillSummary,
    LineItem,
    PatientBasicView,
    PatientBrief,
    PatientSnapshot,
)
from hmsconsole.core.patient import PatientRecord
from hmsconsole.core.types import Action, BillStatus, Role


__all__ = [
    "PERMISSIONS",
    # Access control
    "AccessController",
    # Models
    "Account",
    "AccountInfo",
    # Errors
    "AccountNotFoundError",
    # Types
    "Action",
    "AuthFailedError",
    # Billing
    "Bill",
    "BillStatus",
    "BillSummary",
    "DuplicateUsernameError",
    "HMSError",
    "InvalidPatientDataError",
    "LastAdminProtectedError",
    "LineItem",
    "NotAuthenticatedError",
    "NotFoundError",
    "PatientBasicView",
    "PatientBrief",
    "PatientNotFoundError",
    # Patients
    "PatientRecord",
    "PatientSnapshot",
    "PermissionDeniedError",
    "Role",
    "SelfDeletionForbiddenError",
]
