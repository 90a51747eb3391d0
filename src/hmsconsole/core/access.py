"""Role-based access control.

The permission table below is the only place that decides which role may
perform which action. Menus and the session coordinator both read it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from hmsconsole.core.types import Action, Role


if TYPE_CHECKING:
    from collections.abc import Mapping


PERMISSIONS: Mapping[Role, frozenset[Action]] = MappingProxyType({
    Role.ADMIN: frozenset({
        Action.CREATE_EMPLOYEE,
        Action.DELETE_EMPLOYEE,
        Action.LIST_EMPLOYEES,
        Action.CHANGE_OWN_CREDENTIAL,
    }),
    Role.NURSE: frozenset({
        Action.REGISTER_PATIENT,
        Action.VIEW_PATIENT_BASIC,
        Action.CHANGE_OWN_CREDENTIAL,
    }),
    Role.DOCTOR: frozenset({
        Action.VIEW_PATIENT_BASIC,
        Action.VIEW_PATIENT_FULL,
        Action.ADD_DIAGNOSIS,
        Action.ADD_MEDICAL_NOTE,
        Action.ADD_PRESCRIPTION,
        Action.ADD_BILLING_CHARGE,
        Action.CHANGE_OWN_CREDENTIAL,
    }),
    Role.PHARMACIST: frozenset({
        Action.VIEW_PATIENT_FULL,
        Action.DISPENSE_MEDICATION,
        Action.ADD_BILLING_CHARGE,
        Action.CHANGE_OWN_CREDENTIAL,
    }),
    Role.ACCOUNTS: frozenset({
        Action.VIEW_BILL_SUMMARY,
        Action.RECORD_PAYMENT,
        Action.SET_BILL_STATUS,
        Action.CHANGE_OWN_CREDENTIAL,
    }),
})


class AccessController:
    """Maps (role, action) to permit or deny."""

    def __init__(self, permissions: Mapping[Role, frozenset[Action]] = PERMISSIONS) -> None:
        self._permissions = permissions

    def is_permitted(self, role: Role, action: Action) -> bool:
        return Action(action) in self._permissions.get(Role(role), frozenset())

    def permitted_actions(self, role: Role) -> list[Action]:
        """Permitted actions for a role, in declaration order of ``Action``."""
        return [action for action in Action if self.is_permitted(role, action)]

    def matrix(self) -> dict[Role, dict[Action, bool]]:
        """Full role x action grid, for display."""
        return {role: {action: self.is_permitted(role, action) for action in Action} for role in Role}
