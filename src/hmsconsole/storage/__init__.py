"""Storage layer for accounts and patient records."""

from hmsconsole.storage.accounts import AccountDirectory
from hmsconsole.storage.registry import PatientRegistry

__all__ = ["AccountDirectory", "PatientRegistry"]
