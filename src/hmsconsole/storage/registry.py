"""In-memory patient registry."""

from __future__ import annotations

import logging

from hmsconsole.core.errors import InvalidPatientDataError, PatientNotFoundError
from hmsconsole.core.models import PatientBrief  # noqa: TC001
from hmsconsole.core.patient import PatientRecord


logger = logging.getLogger(__name__)


class PatientRegistry:
    """Stores patient records keyed by id.

    Ids start at 1 and increase by one per registration. They are never
    reused.
    """

    def __init__(self) -> None:
        self._patients: dict[int, PatientRecord] = {}
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._patients)

    @property
    def last_id(self) -> int:
        return self._last_id

    def register(self, name: str, age: int, gender: str, symptoms: str, admission_date: str) -> int:
        if age <= 0:
            msg = f"Age must be positive, got {age}"
            raise InvalidPatientDataError(msg)
        self._last_id += 1
        record = PatientRecord(self._last_id, name, age, gender, symptoms, admission_date)
        self._patients[record.id] = record
        logger.info("Registered patient %d", record.id)
        return record.id

    def find_by_id(self, patient_id: int) -> PatientRecord | None:
        record = self._patients.get(patient_id)
        if record is None:
            logger.debug("Patient %s not found", patient_id)
        return record

    def get(self, patient_id: int) -> PatientRecord:
        record = self.find_by_id(patient_id)
        if record is None:
            raise PatientNotFoundError(patient_id)
        return record

    def list_brief(self) -> list[PatientBrief]:
        return [p.brief() for p in self._patients.values()]
