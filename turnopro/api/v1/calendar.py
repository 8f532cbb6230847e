"""
Calendar API – official holidays per country (workalendar).
"""
from fastapi import APIRouter, HTTPException, Query, status

from turnopro.api.deps import AppSettings
from turnopro.core.exceptions import MissingConfiguration
from turnopro.schemas.holiday import HolidayOut
from turnopro.utils.holidays import get_country_holidays

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("/holidays", response_model=list[HolidayOut])
def list_holidays(
    app_settings: AppSettings,
    year: int = Query(..., ge=1900, le=2200),
    country: str | None = None,
):
    """List the official holidays of a year. Sundays are implicit and not listed."""
    try:
        holidays = get_country_holidays(country or app_settings.HOLIDAY_COUNTRY, year)
    except MissingConfiguration as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [HolidayOut(date=d, name=name) for d, name in sorted(holidays.items())]
