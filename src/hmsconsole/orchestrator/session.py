"""Session coordinator: authentication plus role-gated dispatch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hmsconsole.core.access import AccessController
from hmsconsole.core.errors import NotAuthenticatedError, PermissionDeniedError, SelfDeletionForbiddenError
from hmsconsole.core.types import Action, BillStatus
from hmsconsole.storage.accounts import AccountDirectory
from hmsconsole.storage.registry import PatientRegistry


if TYPE_CHECKING:
    from pydantic import SecretStr

    from hmsconsole.config.settings import Settings
    from hmsconsole.core.models import (
        AccountInfo,
        BillSummary,
        PatientBasicView,
        PatientBrief,
        PatientSnapshot,
    )
    from hmsconsole.core.patient import PatientRecord
    from hmsconsole.core.types import AmountLike, Role

logger = logging.getLogger(__name__)


class SessionCoordinator:
    """Front door to the core for a single interactive session.

    Every public operation checks the logged-in role against the
    ``AccessController`` before touching the directory, registry or a bill.
    A denied request raises ``PermissionDeniedError`` and changes nothing.
    Patients are looked up by id on every call; no record reference is
    handed out.
    """

    def __init__(
        self,
        directory: AccountDirectory | None = None,
        registry: PatientRegistry | None = None,
        access: AccessController | None = None,
    ) -> None:
        self.directory = directory if directory is not None else AccountDirectory()
        self.registry = registry if registry is not None else PatientRegistry()
        self.access = access if access is not None else AccessController()
        self._current: AccountInfo | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> SessionCoordinator:
        """Build a coordinator whose directory is seeded from settings."""
        directory = AccountDirectory(
            admin_username=settings.bootstrap.admin_username,
            admin_password=settings.bootstrap.admin_password,
        )
        return cls(directory=directory)

    # ── Session state ────────────────────────────────────────────────

    @property
    def current_user(self) -> AccountInfo | None:
        return self._current

    @property
    def is_logged_in(self) -> bool:
        return self._current is not None

    @property
    def role(self) -> Role | None:
        return self._current.role if self._current else None

    def login(self, username: str, credential: str | SecretStr) -> AccountInfo:
        """Authenticate and start a session.

        Any session already open is closed first, so a failed login leaves
        the coordinator logged out.

        Raises:
            AuthFailedError: Unknown username or wrong credential.
        """
        if self._current is not None:
            self.logout()
        account = self.directory.authenticate(username, credential)
        self._current = account
        logger.info("Login: %s (%s)", account.username, account.role.label)
        return account

    def logout(self) -> None:
        if self._current is not None:
            logger.info("Logout: %s", self._current.username)
        self._current = None

    def is_permitted(self, action: Action) -> bool:
        if self._current is None:
            return False
        return self.access.is_permitted(self._current.role, action)

    def permitted_actions(self) -> list[Action]:
        if self._current is None:
            return []
        return self.access.permitted_actions(self._current.role)

    def _require(self, *actions: Action) -> AccountInfo:
        """Return the current account if any of ``actions`` is permitted."""
        if self._current is None:
            raise NotAuthenticatedError(actions[0])
        if not any(self.access.is_permitted(self._current.role, a) for a in actions):
            logger.warning("Denied %s for %s (%s)", actions[0].value, self._current.username, self._current.role.value)
            raise PermissionDeniedError(self._current.role, actions[0])
        return self._current

    # ── Accounts ─────────────────────────────────────────────────────

    def create_account(self, username: str, credential: str | SecretStr, role: Role) -> AccountInfo:
        self._require(Action.CREATE_EMPLOYEE)
        return self.directory.create(username, credential, role)

    def account_exists(self, username: str) -> bool:
        self._require(Action.CREATE_EMPLOYEE, Action.DELETE_EMPLOYEE)
        return self.directory.exists(username)

    def delete_account(self, username: str) -> AccountInfo:
        current = self._require(Action.DELETE_EMPLOYEE)
        if username == current.username:
            raise SelfDeletionForbiddenError(username)
        return self.directory.delete(username)

    def list_accounts(self) -> list[AccountInfo]:
        self._require(Action.LIST_EMPLOYEES)
        return self.directory.list_accounts()

    def change_own_credential(self, credential: str | SecretStr) -> None:
        current = self._require(Action.CHANGE_OWN_CREDENTIAL)
        self.directory.change_credential(current.username, credential)

    # ── Patients ─────────────────────────────────────────────────────

    def register_patient(self, name: str, age: int, gender: str, symptoms: str, admission_date: str) -> int:
        self._require(Action.REGISTER_PATIENT)
        return self.registry.register(name, age, gender, symptoms, admission_date)

    def find_patient(self, patient_id: int) -> PatientBasicView:
        self._require(Action.VIEW_PATIENT_BASIC, Action.VIEW_PATIENT_FULL)
        return self.registry.get(patient_id).basic_view()

    def list_patients_brief(self) -> list[PatientBrief]:
        self._require(Action.VIEW_PATIENT_BASIC)
        return self.registry.list_brief()

    def get_patient_full_view(self, patient_id: int) -> PatientSnapshot:
        self._require(Action.VIEW_PATIENT_FULL)
        return self.registry.get(patient_id).snapshot()

    # ── Clinical entries ─────────────────────────────────────────────

    def add_diagnosis(self, patient_id: int, text: str) -> bool:
        return self._patient_for(Action.ADD_DIAGNOSIS, patient_id).add_diagnosis(text)

    def add_medical_note(self, patient_id: int, text: str) -> bool:
        return self._patient_for(Action.ADD_MEDICAL_NOTE, patient_id).add_medical_note(text)

    def add_prescription(self, patient_id: int, text: str) -> bool:
        return self._patient_for(Action.ADD_PRESCRIPTION, patient_id).add_prescription(text)

    def dispense_medication(self, patient_id: int, text: str) -> bool:
        """Record dispensed medication; it is kept with the prescriptions."""
        return self._patient_for(Action.DISPENSE_MEDICATION, patient_id).add_prescription(text)

    # ── Billing ──────────────────────────────────────────────────────

    def add_charge(self, patient_id: int, description: str, amount: AmountLike) -> bool:
        return self._patient_for(Action.ADD_BILLING_CHARGE, patient_id).bill.add_charge(description, amount)

    def add_payment(self, patient_id: int, method: str, amount: AmountLike) -> bool:
        return self._patient_for(Action.RECORD_PAYMENT, patient_id).bill.add_payment(method, amount)

    def set_bill_status(self, patient_id: int, status: BillStatus) -> None:
        patient = self._patient_for(Action.SET_BILL_STATUS, patient_id)
        patient.bill.set_status(status)
        logger.info("Bill status for patient %d manually set to %s", patient_id, BillStatus(status).value)

    def get_bill_summary(self, patient_id: int) -> BillSummary:
        return self._patient_for(Action.VIEW_BILL_SUMMARY, patient_id).bill.summary()

    def require_patient(self, action: Action, patient_id: int) -> None:
        """Check that ``action`` is permitted and the patient exists.

        Lets a caller fail early, before collecting the rest of the input
        for ``action``. The operation itself checks again.

        Raises:
            PermissionDeniedError: ``action`` is not permitted for the session.
            PatientNotFoundError: No patient with ``patient_id``.
        """
        self._patient_for(action, patient_id)

    def _patient_for(self, action: Action, patient_id: int) -> PatientRecord:
        self._require(action)
        return self.registry.get(patient_id)
