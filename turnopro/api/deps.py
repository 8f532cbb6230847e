from typing import Annotated, Iterable

from fastapi import Depends, HTTPException, status

from turnopro.core.config import Settings, settings
from turnopro.core.exceptions import MissingConfiguration
from turnopro.schemas.holiday import HolidayIn
from turnopro.utils.holidays import HolidayCalendar, HolidayInfo


def get_settings() -> Settings:
    return settings


def build_calendar(
    holidays: list[HolidayIn],
    years: Iterable[int],
    include_country_holidays: bool,
    app_settings: Settings,
) -> HolidayCalendar:
    """Kalender aus den übergebenen Feiertagen, optional ergänzt um die Landesfeiertage."""
    extra = [HolidayInfo(h.date, h.name) if h.name else h.date for h in holidays]
    if not include_country_holidays:
        return HolidayCalendar(extra)
    try:
        return HolidayCalendar.for_country(app_settings.HOLIDAY_COUNTRY, years, extra)
    except MissingConfiguration as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


AppSettings = Annotated[Settings, Depends(get_settings)]
