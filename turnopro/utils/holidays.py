"""
Feiertagskalender für die Lohnberechnung.
Sonntage sind immer Feiertage; dazu kommen explizit konfigurierte Daten,
optional vorbelegt mit den gesetzlichen Feiertagen eines Landes (workalendar).
"""
from datetime import date, datetime
from typing import Iterable, NamedTuple

from workalendar.exceptions import CalendarError
from workalendar.registry import registry

from turnopro.core.exceptions import MissingConfiguration

SUNDAY = 6
SUNDAY_NAME = "Domingo"


class HolidayInfo(NamedTuple):
    date: date
    name: str


def _as_date(d: date | datetime) -> date:
    return d.date() if isinstance(d, datetime) else d


def get_country_holidays(country: str, year: int) -> dict[date, str]:
    """Gibt alle gesetzlichen Feiertage eines Landes für ein Jahr zurück."""
    cal_class = registry.get(country.upper())
    if cal_class is None:
        raise MissingConfiguration(f"Kein Feiertagskalender für Land {country!r}")
    try:
        holidays = cal_class().holidays(year)
    except (CalendarError, NotImplementedError, ValueError) as e:
        # Einige Kalender decken nur bestimmte Jahre ab (z. B. CN, JP, HK)
        raise MissingConfiguration(f"Keine Feiertage für {country.upper()} {year}: {e}") from e
    return {d: name for d, name in holidays}


class HolidayCalendar:
    """
    Unveränderliche Feiertagsmenge. Wird explizit an den PayrollService
    übergeben, damit Tests und Länder eigene Kalender verwenden können.
    """

    def __init__(self, holidays: Iterable[date | datetime | HolidayInfo] | dict[date, str] = ()):
        names: dict[date, str | None] = {}
        if isinstance(holidays, dict):
            for d, name in holidays.items():
                names[_as_date(d)] = name
        else:
            for h in holidays:
                if isinstance(h, HolidayInfo):
                    names[_as_date(h.date)] = h.name
                else:
                    names.setdefault(_as_date(h), None)
        self._names = names
        self._dates = frozenset(names)

    @classmethod
    def for_country(
        cls,
        country: str,
        years: Iterable[int],
        extra: Iterable[date | datetime | HolidayInfo] = (),
    ) -> "HolidayCalendar":
        merged: list[HolidayInfo] = []
        for year in sorted(set(years)):
            merged.extend(HolidayInfo(d, name) for d, name in get_country_holidays(country, year).items())
        # Explizite Einträge überschreiben Namen aus dem Länderkalender
        merged.extend(extra)
        return cls(merged)

    def is_holiday(self, d: date | datetime) -> bool:
        d = _as_date(d)
        return d.weekday() == SUNDAY or d in self._dates

    def holiday_name(self, d: date | datetime) -> str | None:
        d = _as_date(d)
        name = self._names.get(d)
        if name:
            return name
        if d.weekday() == SUNDAY:
            return SUNDAY_NAME
        return "Festivo" if d in self._dates else None

    def __contains__(self, d: date | datetime) -> bool:
        return self.is_holiday(d)

    def __len__(self) -> int:
        return len(self._dates)
