"""
Payroll API – stateless calculation endpoints.
All inputs (shifts, settings, holidays, benefits, deductions) come with the request.
"""
from datetime import date

from fastapi import APIRouter, HTTPException, status

from turnopro.api.deps import AppSettings, build_calendar
from turnopro.core.exceptions import InvalidTimeFormat, MissingConfiguration
from turnopro.schemas.payroll import (
    PayPeriod,
    PayrollSummary,
    PayrollSummaryRequest,
    ShiftClassifyRequest,
    ShiftResult,
)
from turnopro.services.payroll_service import PayrollService
from turnopro.services.period_service import resolve_period

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post("/summary", response_model=PayrollSummary)
def calculate_summary(payload: PayrollSummaryRequest, app_settings: AppSettings):
    """
    Calculate the payroll summary of one user for the period containing reference_date.
    Shifts with malformed times are excluded and reported in excluded_shifts.
    """
    if payload.settings is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(MissingConfiguration()))

    # Folgejahr für Nachtschichten am 31.12.
    year = payload.reference_date.year
    calendar = build_calendar(
        payload.holidays, [year, year + 1], payload.include_country_holidays, app_settings
    )

    service = PayrollService(calendar)
    return service.calculate_period_payroll(
        payload.shifts,
        payload.settings,
        payload.benefits,
        payload.deductions,
        payload.user_id,
        payload.reference_date,
    )


@router.post("/shift", response_model=ShiftResult)
def classify_shift(payload: ShiftClassifyRequest, app_settings: AppSettings):
    """Classify a single shift, given the hours already worked earlier that day."""
    if payload.settings is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(MissingConfiguration()))

    year = payload.shift.date.year
    calendar = build_calendar(
        payload.holidays, [year, year + 1], payload.include_country_holidays, app_settings
    )

    service = PayrollService(calendar)
    try:
        return service.classify_shift(
            payload.shift, payload.settings, payload.hours_already_worked_today
        )
    except InvalidTimeFormat as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/period", response_model=PayPeriod)
def get_period(reference_date: date, cycle: str = "monthly"):
    """
    Resolve the pay period (inclusive start/end) containing reference_date.
    Accepts the legacy cycle name "fortnightly" as an alias of "bi-weekly".
    """
    try:
        return resolve_period(reference_date, cycle)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
