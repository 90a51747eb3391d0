"""Exceptions raised by the record and billing core.

Every error here is a recoverable outcome for the caller. The shell reports
them and keeps running.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from hmsconsole.core.types import Action, Role


class HMSError(Exception):
    """Base class for all hospital console errors."""


class NotFoundError(HMSError):
    """A referenced account or patient does not exist."""


class AccountNotFoundError(NotFoundError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"No such user: {username}")


class PatientNotFoundError(NotFoundError):
    def __init__(self, patient_id: int) -> None:
        self.patient_id = patient_id
        super().__init__(f"Patient not found: {patient_id}")


class DuplicateUsernameError(HMSError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already exists: {username}")


class LastAdminProtectedError(HMSError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Cannot delete the last Admin account.")


class AuthFailedError(HMSError):
    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class PermissionDeniedError(HMSError):
    def __init__(self, role: Role | None, action: Action) -> None:
        self.role = role
        self.action = action
        who = role.label if role is not None else "Anonymous"
        super().__init__(f"{who} is not permitted to {action.value.replace('_', ' ')}")


class NotAuthenticatedError(PermissionDeniedError):
    """An action was requested while no session is logged in."""

    def __init__(self, action: Action) -> None:
        super().__init__(None, action)


class SelfDeletionForbiddenError(HMSError):
    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("You cannot delete your own account.")


class InvalidPatientDataError(HMSError, ValueError):
    """Patient details rejected at registration."""
