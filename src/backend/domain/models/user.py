from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    PATIENT = "patient"
    CARETAKER = "caretaker"
    DOCTOR = "doctor"
    ADMIN = "admin"


class SafeUser(BaseModel):
    """Public view of a user record. Never carries the password."""

    model_config = ConfigDict(populate_by_name=True)

    patient_id: str = Field(alias="patientId")
    name: Optional[str] = None
    mobile: Optional[str] = None
    role: str


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient_id: str = Field(alias="patientId")
    name: Optional[str] = None
    mobile: Optional[str] = None
    # Stored and compared in plain text. There is no hashing in this service.
    password: Optional[str] = None
    # Free-form; the UserRole values are the ones the frontend knows about.
    role: str = UserRole.PATIENT.value

    def to_safe(self) -> SafeUser:
        return SafeUser(
            patient_id=self.patient_id,
            name=self.name,
            mobile=self.mobile,
            role=self.role,
        )
