from __future__ import annotations

from typing import List

from fastapi import APIRouter

from src.backend.domain.models.dashboard import (
    AdherenceStats,
    DashboardSummary,
    MedicineEntry,
    ScheduleEntry,
)
from src.backend.services.dashboard.service import dashboard_service


router = APIRouter(prefix="", tags=["dashboard"])


@router.get("/medicines", response_model=List[MedicineEntry])
async def list_medicines() -> List[MedicineEntry]:
    return dashboard_service.get_medicines()


@router.get("/schedule/today", response_model=List[ScheduleEntry])
async def schedule_today() -> List[ScheduleEntry]:
    return dashboard_service.get_today_schedule()


@router.get("/adherence", response_model=AdherenceStats)
async def adherence() -> AdherenceStats:
    return dashboard_service.get_adherence()


@router.get("/summary", response_model=DashboardSummary)
async def summary() -> DashboardSummary:
    return dashboard_service.get_summary()
