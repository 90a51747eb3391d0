"""Interactive menu shell on top of the session coordinator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from hmsconsole.console.prompts import InputReader
from hmsconsole.core.errors import AuthFailedError, HMSError
from hmsconsole.core.types import Action, BillStatus, Role


if TYPE_CHECKING:
    from typing import TextIO

    from hmsconsole.config.settings import Settings
    from hmsconsole.console.logger import HospitalConsole
    from hmsconsole.orchestrator.session import SessionCoordinator

logger = logging.getLogger(__name__)


class MenuEntry(NamedTuple):
    label: str
    action: Action
    handler: str
    roles: tuple[Role, ...] | None = None


# Every menu entry a session can see; filtered by the logged-in role. An entry
# with roles replaces the generic entry for its action for those roles.
MENU: tuple[MenuEntry, ...] = (
    MenuEntry("Register employee", Action.CREATE_EMPLOYEE, "_register_employee"),
    MenuEntry("Delete employee", Action.DELETE_EMPLOYEE, "_delete_employee"),
    MenuEntry("View all employees", Action.LIST_EMPLOYEES, "_list_employees"),
    MenuEntry("Register new patient", Action.REGISTER_PATIENT, "_register_patient"),
    MenuEntry("View registered patients (brief)", Action.VIEW_PATIENT_BASIC, "_list_patients"),
    MenuEntry("View basic patient information", Action.VIEW_PATIENT_BASIC, "_view_patient_basic"),
    MenuEntry("View full patient record", Action.VIEW_PATIENT_FULL, "_view_patient_full"),
    MenuEntry("Add diagnostic information", Action.ADD_DIAGNOSIS, "_add_diagnosis"),
    MenuEntry("Add medical notes", Action.ADD_MEDICAL_NOTE, "_add_medical_note"),
    MenuEntry("Prescribe medication", Action.ADD_PRESCRIPTION, "_add_prescription"),
    MenuEntry("Record medication dispensed", Action.DISPENSE_MEDICATION, "_dispense_medication"),
    MenuEntry("Add billing entry", Action.ADD_BILLING_CHARGE, "_add_charge"),
    MenuEntry(
        "Add medication cost to patient bill",
        Action.ADD_BILLING_CHARGE,
        "_add_medication_cost",
        roles=(Role.PHARMACIST,),
    ),
    MenuEntry("View complete patient bill", Action.VIEW_BILL_SUMMARY, "_view_bill"),
    MenuEntry("Record payment made", Action.RECORD_PAYMENT, "_record_payment"),
    MenuEntry("Mark bill status manually", Action.SET_BILL_STATUS, "_set_bill_status"),
    MenuEntry("Change my password", Action.CHANGE_OWN_CREDENTIAL, "_change_password"),
)

EMPLOYEE_ROLES = (Role.DOCTOR, Role.NURSE, Role.PHARMACIST, Role.ACCOUNTS, Role.ADMIN)
MANUAL_STATUSES = (BillStatus.FULLY_CLEARED, BillStatus.PARTIALLY_PAID, BillStatus.PENDING)


def menu_for(session: SessionCoordinator) -> list[MenuEntry]:
    """Menu entries the current session is permitted to use."""
    entries = [
        entry for entry in MENU
        if session.is_permitted(entry.action) and (entry.roles is None or session.role in entry.roles)
    ]
    specific = {entry.action for entry in entries if entry.roles is not None}
    return [entry for entry in entries if entry.roles is not None or entry.action not in specific]


class HospitalShell:
    """Login loop and per-role menus.

    Reads validated values through an ``InputReader`` and forwards them to
    the ``SessionCoordinator``. Core errors are shown and the menu carries on.
    """

    def __init__(
        self,
        session: SessionCoordinator,
        console: HospitalConsole,
        settings: Settings,
        stream: TextIO | None = None,
    ) -> None:
        self.session = session
        self.out = console
        self.settings = settings
        self.read = InputReader(console.console, stream, currency=settings.shell.currency_symbol)

    def run(self) -> None:
        self.out.print_header(self.settings.bootstrap.admin_username)
        try:
            self._main_loop()
        except EOFError:
            self.out.print_info("\nExiting.")
        finally:
            self.session.logout()

    def _main_loop(self) -> None:
        while True:
            self.out.print_menu_title("Hospital Management System")
            if self.read.choice("Choose an option", ["Login", "Exit"]) == 1:
                self.out.print_info("Exiting. Goodbye.")
                return
            username = self.read.text("Username")
            password = self.read.secret("Password")
            try:
                account = self.session.login(username, password)
            except AuthFailedError as e:
                self.out.print_error(str(e))
                continue
            self.out.print_welcome(account)
            self._session_loop(f"{account.role.label} Menu")
            self.session.logout()
            self.out.print_info("Logged out.")

    def _session_loop(self, title: str) -> None:
        entries = menu_for(self.session)
        labels = [entry.label for entry in entries] + ["Logout (Back)"]
        while True:
            self.out.print_menu_title(title)
            index = self.read.choice("Choose an option", labels)
            if index == len(entries):
                return
            entry = entries[index]
            logger.debug("Menu selection: %s", entry.action.value)
            try:
                getattr(self, entry.handler)()
            except HMSError as e:
                self.out.print_error(str(e))

    def _patient_id(self, action: Action | None = None, allow_cancel: bool = False) -> int:
        """Prompt for a patient id; 0 means cancel when allowed.

        With ``action``, an unknown id or a denied action is reported before
        any further prompts.
        """
        prompt = "Enter patient ID (0 to cancel)" if allow_cancel else "Enter patient ID"
        patient_id = self.read.integer(prompt, 0 if allow_cancel else 1, self.settings.shell.max_patient_id)
        if action is not None and patient_id != 0:
            self.session.require_patient(action, patient_id)
        return patient_id

    # ── Employees ────────────────────────────────────────────────────

    def _register_employee(self) -> None:
        username = self.read.text("Enter username for employee")
        if self.session.account_exists(username):
            self.out.print_warning("Username already exists.")
            return
        role = EMPLOYEE_ROLES[self.read.choice("Choose role", [r.label for r in EMPLOYEE_ROLES])]
        password = self.read.secret("Set password for employee")
        account = self.session.create_account(username, password, role)
        self.out.print_success(f"Employee registered: {account.username} ({account.role.label})")

    def _delete_employee(self) -> None:
        self.out.print_employees(self.session.list_accounts())
        username = self.read.text("Enter username to delete (or type 'back' to cancel)")
        if username == "back":
            return
        self.session.delete_account(username)
        self.out.print_success(f"Deleted user: {username}")

    def _list_employees(self) -> None:
        self.out.print_employees(self.session.list_accounts())

    def _change_password(self) -> None:
        self.session.change_own_credential(self.read.secret("Enter new password"))
        self.out.print_success("Password updated.")

    # ── Patients ─────────────────────────────────────────────────────

    def _register_patient(self) -> None:
        name = self.read.text("Full name")
        age = self.read.integer("Age", 1, 200)
        gender = self.read.text("Gender")
        symptoms = self.read.text("Symptoms")
        admission_date = self.read.text("Date of admission (YYYY-MM-DD)")
        patient_id = self.session.register_patient(name, age, gender, symptoms, admission_date)
        self.out.print_success(f"Patient registered with ID: {patient_id}")

    def _list_patients(self) -> None:
        self.out.print_patients_brief(self.session.list_patients_brief())

    def _view_patient_basic(self) -> None:
        self.out.print_patients_brief(self.session.list_patients_brief())
        patient_id = self._patient_id(allow_cancel=True)
        if patient_id == 0:
            return
        self.out.print_patient_basic(self.session.find_patient(patient_id))

    def _view_patient_full(self) -> None:
        patient_id = self._patient_id(allow_cancel=True)
        if patient_id == 0:
            return
        self.out.print_patient_full(self.session.get_patient_full_view(patient_id))

    def _add_diagnosis(self) -> None:
        patient_id = self._patient_id(Action.ADD_DIAGNOSIS)
        self.session.add_diagnosis(patient_id, self.read.text("Enter diagnostic information"))
        self.out.print_success("Diagnosis added.")

    def _add_medical_note(self) -> None:
        patient_id = self._patient_id(Action.ADD_MEDICAL_NOTE)
        self.session.add_medical_note(patient_id, self.read.text("Enter medical note"))
        self.out.print_success("Medical note added.")

    def _add_prescription(self) -> None:
        patient_id = self._patient_id(Action.ADD_PRESCRIPTION)
        self.session.add_prescription(patient_id, self.read.text("Enter prescription details"))
        self.out.print_success("Prescription recorded.")

    def _dispense_medication(self) -> None:
        patient_id = self._patient_id(Action.DISPENSE_MEDICATION)
        self.session.dispense_medication(patient_id, self.read.text("Enter medication details dispensed"))
        self.out.print_success("Medication dispensed and recorded.")

    # ── Billing ──────────────────────────────────────────────────────

    def _add_charge(self) -> None:
        patient_id = self._patient_id(Action.ADD_BILLING_CHARGE)
        description = self.read.text("Charge description (e.g., Consultation, X-ray, Medication)")
        amount = self.read.amount(f"Amount {self.settings.shell.currency_symbol}")
        if self.session.add_charge(patient_id, description, amount):
            self.out.print_success("Charge added to bill.")
        else:
            self.out.print_warning("Charge ignored: amount must be positive.")

    def _add_medication_cost(self) -> None:
        patient_id = self._patient_id(Action.ADD_BILLING_CHARGE)
        description = self.read.text("Medication description")
        amount = self.read.amount(f"Cost {self.settings.shell.currency_symbol}")
        if self.session.add_charge(patient_id, description, amount):
            self.out.print_success("Medication cost added to bill.")
        else:
            self.out.print_warning("Charge ignored: amount must be positive.")

    def _view_bill(self) -> None:
        self.out.print_bill_summary(self.session.get_bill_summary(self._patient_id()))

    def _record_payment(self) -> None:
        patient_id = self._patient_id(Action.RECORD_PAYMENT)
        method = self.read.text("Payment method (e.g., Cash/Card/Insurance)")
        amount = self.read.amount(f"Amount paid {self.settings.shell.currency_symbol}")
        if self.session.add_payment(patient_id, method, amount):
            self.out.print_success("Payment recorded.")
        else:
            self.out.print_warning("Payment ignored: amount must be positive.")

    def _set_bill_status(self) -> None:
        patient_id = self._patient_id(Action.SET_BILL_STATUS)
        status = MANUAL_STATUSES[self.read.choice("Select status", [s.label for s in MANUAL_STATUSES])]
        self.session.set_bill_status(patient_id, status)
        self.out.print_success("Bill status updated.")
