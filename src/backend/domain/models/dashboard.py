from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DoseStatus(str, Enum):
    TAKEN = "Taken"
    UPCOMING = "Upcoming"
    MISSED = "Missed"


class MedicineEntry(BaseModel):
    id: int
    name: str
    dose: str
    frequency: str
    remaining: int
    status: DoseStatus


class ScheduleEntry(BaseModel):
    id: int
    name: str
    dose: str
    # Time of day as displayed, e.g. "08:00 AM".
    time: str
    remaining: int
    status: DoseStatus


class AdherenceStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    taken: int
    missed: int
    rate: float
    taken_percent: int = Field(alias="takenPercent")


class DashboardSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active_medicines: int = Field(alias="activeMedicines")
    doses_taken: int = Field(alias="dosesTaken")
    doses_missed: int = Field(alias="dosesMissed")
