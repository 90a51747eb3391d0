"""Core type definitions and enums."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import TypeAlias


# Anything a caller may hand over as a money amount
AmountLike: TypeAlias = Decimal | int | float | str


class Role(str, Enum):
    """Staff roles that determine permitted actions."""

    ADMIN = "admin"
    DOCTOR = "doctor"
    NURSE = "nurse"
    PHARMACIST = "pharmacist"
    ACCOUNTS = "accounts"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS = {
    Role.ADMIN: "Admin",
    Role.DOCTOR: "Doctor",
    Role.NURSE: "Nurse",
    Role.PHARMACIST: "Pharmacist",
    Role.ACCOUNTS: "Accounts Manager",
}


class Action(str, Enum):
    """Operations a session may request."""

    CREATE_EMPLOYEE = "create_employee"
    DELETE_EMPLOYEE = "delete_employee"
    LIST_EMPLOYEES = "list_employees"
    REGISTER_PATIENT = "register_patient"
    VIEW_PATIENT_BASIC = "view_patient_basic"
    VIEW_PATIENT_FULL = "view_patient_full"
    ADD_DIAGNOSIS = "add_diagnosis"
    ADD_MEDICAL_NOTE = "add_medical_note"
    ADD_PRESCRIPTION = "add_prescription"
    ADD_BILLING_CHARGE = "add_billing_charge"
    DISPENSE_MEDICATION = "dispense_medication"
    RECORD_PAYMENT = "record_payment"
    SET_BILL_STATUS = "set_bill_status"
    VIEW_BILL_SUMMARY = "view_bill_summary"
    CHANGE_OWN_CREDENTIAL = "change_own_credential"


class BillStatus(str, Enum):
    """Payment state of a patient's bill."""

    PENDING = "pending"
    PARTIALLY_PAID = "partially_paid"
    FULLY_CLEARED = "fully_cleared"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()
