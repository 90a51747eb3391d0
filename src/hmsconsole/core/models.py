"""Data models for accounts, patients and bills."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, Field, SecretStr

from hmsconsole.core.types import BillStatus, Role  # noqa: TC001 - Pydantic needs at runtime


class Account(BaseModel):
    """A staff login held by the account directory."""
    id: str = Field(default_factory=lambda: uuid4().hex)
    username: str
    credential: SecretStr
    role: Role

    def info(self) -> AccountInfo:
        return AccountInfo(id=self.id, username=self.username, role=self.role)


class AccountInfo(BaseModel):
    """Credential-free view of an account."""
    id: str
    username: str
    role: Role

    model_config = {"frozen": True}


class LineItem(BaseModel):
    """One charge (description, amount) or payment (method, amount)."""
    label: str
    amount: Decimal

    model_config = {"frozen": True}


class BillSummary(BaseModel):
    """Point-in-time view of a bill."""
    charges: tuple[LineItem, ...] = ()
    payments: tuple[LineItem, ...] = ()
    total_charges: Decimal = Decimal(0)
    total_payments: Decimal = Decimal(0)
    balance: Decimal = Decimal(0)
    status: BillStatus = BillStatus.PENDING

    model_config = {"frozen": True}


class PatientBrief(BaseModel):
    id: int
    name: str

    model_config = {"frozen": True}


class PatientBasicView(BaseModel):
    """Demographic fields only."""
    id: int
    name: str
    age: int
    gender: str
    symptoms: str
    admission_date: str

    model_config = {"frozen": True}


class PatientSnapshot(PatientBasicView):
    """Full record including clinical entries and the bill."""
    diagnoses: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()
    prescriptions: tuple[str, ...] = ()
    bill: BillSummary = Field(default_factory=BillSummary)
