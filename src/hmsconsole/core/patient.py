"""Patient record: demographics, clinical entries and the owned bill."""

from __future__ import annotations

from hmsconsole.core.billing import Bill
from hmsconsole.core.models import PatientBasicView, PatientBrief, PatientSnapshot


class PatientRecord:
    """A registered patient.

    Clinical lists are append-only; empty entries are dropped.
    """

    def __init__(
        self,
        patient_id: int,
        name: str,
        age: int,
        gender: str,
        symptoms: str,
        admission_date: str,
    ) -> None:
        self._id = patient_id
        self.name = name
        self.age = age
        self.gender = gender
        self.symptoms = symptoms
        self.admission_date = admission_date
        self._diagnoses: list[str] = []
        self._notes: list[str] = []
        self._prescriptions: list[str] = []
        self._bill = Bill()

    @property
    def id(self) -> int:
        return self._id

    @property
    def bill(self) -> Bill:
        return self._bill

    def add_diagnosis(self, text: str) -> bool:
        return _append(self._diagnoses, text)

    def add_medical_note(self, text: str) -> bool:
        return _append(self._notes, text)

    def add_prescription(self, text: str) -> bool:
        return _append(self._prescriptions, text)

    def brief(self) -> PatientBrief:
        return PatientBrief(id=self._id, name=self.name)

    def basic_view(self) -> PatientBasicView:
        return PatientBasicView(**self._demographics())

    def snapshot(self) -> PatientSnapshot:
        return PatientSnapshot(
            **self._demographics(),
            diagnoses=tuple(self._diagnoses),
            notes=tuple(self._notes),
            prescriptions=tuple(self._prescriptions),
            bill=self._bill.summary(),
        )

    def _demographics(self) -> dict[str, int | str]:
        return {
            "id": self._id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "symptoms": self.symptoms,
            "admission_date": self.admission_date,
        }


def _append(entries: list[str], text: str) -> bool:
    if not text:
        return False
    entries.append(text)
    return True
