"""Per-patient bill with a derived payment status."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from hmsconsole.core.models import BillSummary, LineItem
from hmsconsole.core.types import BillStatus


if TYPE_CHECKING:
    from hmsconsole.core.types import AmountLike

logger = logging.getLogger(__name__)


def to_amount(value: AmountLike) -> Decimal | None:
    """Convert a caller-supplied amount to a positive Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: Amount as Decimal, int, float or numeric string.

    Returns:
        The amount, or None when it is not a finite positive number.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


class Bill:
    """Charges and payments for one patient.

    Totals are summed from the full history on every call. The status is
    re-derived after each charge or payment; ``set_status`` overrides it
    until the next one.
    """

    def __init__(self) -> None:
        self._charges: list[LineItem] = []
        self._payments: list[LineItem] = []
        self._status = BillStatus.PENDING

    @property
    def status(self) -> BillStatus:
        return self._status

    def add_charge(self, description: str, amount: AmountLike) -> bool:
        """Append a charge. Returns False (and records nothing) for empty text or a bad amount."""
        value = to_amount(amount)
        if not description or value is None:
            logger.warning("Ignoring charge %r of %r", description, amount)
            return False
        self._charges.append(LineItem(label=description, amount=value))
        self._update_status()
        return True

    def add_payment(self, method: str, amount: AmountLike) -> bool:
        """Append a payment. Returns False (and records nothing) for empty text or a bad amount."""
        value = to_amount(amount)
        if not method or value is None:
            logger.warning("Ignoring payment %r of %r", method, amount)
            return False
        self._payments.append(LineItem(label=method, amount=value))
        self._update_status()
        return True

    def total_charges(self) -> Decimal:
        return sum((c.amount for c in self._charges), Decimal(0))

    def total_payments(self) -> Decimal:
        return sum((p.amount for p in self._payments), Decimal(0))

    def balance(self) -> Decimal:
        return self.total_charges() - self.total_payments()

    def set_status(self, status: BillStatus) -> None:
        self._status = BillStatus(status)

    def summary(self) -> BillSummary:
        return BillSummary(
            charges=tuple(self._charges),
            payments=tuple(self._payments),
            total_charges=self.total_charges(),
            total_payments=self.total_payments(),
            balance=self.balance(),
            status=self._status,
        )

    def _update_status(self) -> None:
        if self.balance() <= 0:
            self._status = BillStatus.FULLY_CLEARED
        elif self.total_payments() > 0:
            self._status = BillStatus.PARTIALLY_PAID
        else:
            self._status = BillStatus.PENDING
