from __future__ import annotations

from typing import List

from src.backend.domain.models.dashboard import (
    AdherenceStats,
    DashboardSummary,
    DoseStatus,
    MedicineEntry,
    ScheduleEntry,
)


# (id, name, dose, frequency, time of day, remaining, status)
_MEDICINES = [
    (1, "Aspirin", "100mg", "Daily", "08:00 AM", 15, DoseStatus.TAKEN),
    (2, "Metformin", "500mg", "Twice Daily", "12:00 PM", 8, DoseStatus.UPCOMING),
    (3, "Lisinopril", "10mg", "Daily", "02:00 PM", 3, DoseStatus.UPCOMING),
    (4, "Atorvastatin", "20mg", "Daily", "08:00 PM", 20, DoseStatus.UPCOMING),
    (5, "Vitamin D", "1000 IU", "Daily", "09:00 AM", 2, DoseStatus.MISSED),
]


class StaticDashboardService:
    """Fixed dashboard data for the patient UI.

    Values do not depend on the caller or the clock. Results are rebuilt on
    each call so callers can't alter what the next request sees.
    """

    def get_medicines(self) -> List[MedicineEntry]:
        return [
            MedicineEntry(
                id=med_id,
                name=name,
                dose=dose,
                frequency=frequency,
                remaining=remaining,
                status=status,
            )
            for med_id, name, dose, frequency, _time, remaining, status in _MEDICINES
        ]

    def get_today_schedule(self) -> List[ScheduleEntry]:
        return [
            ScheduleEntry(
                id=med_id,
                name=name,
                dose=dose,
                time=time,
                remaining=remaining,
                status=status,
            )
            for med_id, name, dose, _frequency, time, remaining, status in _MEDICINES
        ]

    def get_adherence(self) -> AdherenceStats:
        return AdherenceStats(taken=7, missed=1, rate=87.5, taken_percent=88)

    def get_summary(self) -> DashboardSummary:
        return DashboardSummary(active_medicines=5, doses_taken=7, doses_missed=1)


dashboard_service = StaticDashboardService()
