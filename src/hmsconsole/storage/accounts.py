"""In-memory account directory with last-admin protection."""

from __future__ import annotations

import hmac
import logging

from pydantic import SecretStr

from hmsconsole.core.errors import (
    AccountNotFoundError,
    AuthFailedError,
    DuplicateUsernameError,
    LastAdminProtectedError,
)
from hmsconsole.core.models import Account, AccountInfo
from hmsconsole.core.types import Role


logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"  # noqa: S105 - documented bootstrap login


class AccountDirectory:
    """Owns every staff account, keyed by username in creation order.

    Construction seeds exactly one Admin account, so the directory is never
    without an Admin. Callers only ever receive ``AccountInfo`` copies.
    """

    def __init__(
        self,
        admin_username: str = DEFAULT_ADMIN_USERNAME,
        admin_password: str | SecretStr = DEFAULT_ADMIN_PASSWORD,
    ) -> None:
        self._accounts: dict[str, Account] = {}
        self._bootstrap(admin_username, admin_password)

    def _bootstrap(self, username: str, password: str | SecretStr) -> None:
        self._accounts[username] = Account(username=username, credential=_secret(password), role=Role.ADMIN)
        logger.info("Seeded default admin account '%s'", username)

    def __len__(self) -> int:
        return len(self._accounts)

    def exists(self, username: str) -> bool:
        return username in self._accounts

    def get(self, username: str) -> AccountInfo:
        account = self._accounts.get(username)
        if account is None:
            raise AccountNotFoundError(username)
        return account.info()

    def create(self, username: str, credential: str | SecretStr, role: Role) -> AccountInfo:
        if self.exists(username):
            raise DuplicateUsernameError(username)
        account = Account(username=username, credential=_secret(credential), role=Role(role))
        self._accounts[username] = account
        logger.info("Created account '%s' (%s)", username, account.role.label)
        return account.info()

    def delete(self, username: str) -> AccountInfo:
        account = self._accounts.get(username)
        if account is None:
            raise AccountNotFoundError(username)
        if account.role is Role.ADMIN and self.admin_count() <= 1:
            raise LastAdminProtectedError(username)
        del self._accounts[username]
        logger.info("Deleted account '%s'", username)
        return account.info()

    def authenticate(self, username: str, credential: str | SecretStr) -> AccountInfo:
        """Return the matching account, or raise ``AuthFailedError``.

        An unknown username and a wrong credential fail the same way.
        """
        account = self._accounts.get(username)
        supplied = _secret(credential).get_secret_value().encode()
        if account is None or not hmac.compare_digest(account.credential.get_secret_value().encode(), supplied):
            logger.warning("Failed login attempt for '%s'", username)
            raise AuthFailedError
        return account.info()

    def change_credential(self, username: str, credential: str | SecretStr) -> None:
        account = self._accounts.get(username)
        if account is None:
            raise AccountNotFoundError(username)
        account.credential = _secret(credential)
        logger.info("Credential updated for '%s'", username)

    def admin_count(self) -> int:
        return sum(1 for a in self._accounts.values() if a.role is Role.ADMIN)

    def list_accounts(self) -> list[AccountInfo]:
        return [a.info() for a in self._accounts.values()]


def _secret(value: str | SecretStr) -> SecretStr:
    return value if isinstance(value, SecretStr) else SecretStr(value)
