"""
Abrechnungszeiträume: Monat oder Quincena (1.–15. / 16.–Monatsende).
"""
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from turnopro.schemas.company import normalize_cycle
from turnopro.schemas.payroll import PayPeriod

MONTH_NAMES_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)
FIRST_HALF_LAST_DAY = 15


def _month_end(d: date) -> date:
    return d + relativedelta(day=31)


def resolve_period(reference_date: date | datetime, cycle: str = "monthly") -> PayPeriod:
    """Gibt den Zeitraum (inklusive Start- und Enddatum) zurück, der reference_date enthält."""
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    cycle = normalize_cycle(cycle)

    if cycle == "monthly":
        start = reference_date.replace(day=1)
        end = _month_end(reference_date)
    elif cycle == "bi-weekly":
        if reference_date.day <= FIRST_HALF_LAST_DAY:
            start = reference_date.replace(day=1)
            end = reference_date.replace(day=FIRST_HALF_LAST_DAY)
        else:
            start = reference_date.replace(day=FIRST_HALF_LAST_DAY + 1)
            end = _month_end(reference_date)
    else:
        raise ValueError(f"Unbekannter Abrechnungszyklus: {cycle!r}")

    key = period_key(reference_date, cycle)
    return PayPeriod(
        start=start,
        end=end,
        cycle=cycle,
        key=key,
        description=period_description(key, cycle),
    )


def period_key(d: date, cycle: str = "bi-weekly") -> str:
    """2024-02 (monatlich) bzw. 2024-02-1 / 2024-02-2 (Quincena)."""
    cycle = normalize_cycle(cycle)
    month_key = f"{d.year}-{d.month:02d}"
    if cycle == "monthly":
        return month_key
    half = 1 if d.day <= FIRST_HALF_LAST_DAY else 2
    return f"{month_key}-{half}"


def period_description(key: str, cycle: str = "bi-weekly") -> str:
    """Lesbare Bezeichnung auf Spanisch, z.B. '16-29 de febrero de 2024'."""
    cycle = normalize_cycle(cycle)
    parts = key.split("-")
    year, month = int(parts[0]), int(parts[1])
    month_name = MONTH_NAMES_ES[month - 1]

    if cycle == "monthly":
        return f"{month_name.capitalize()} {year}"

    if int(parts[2]) == 1:
        return f"1-{FIRST_HALF_LAST_DAY} de {month_name} de {year}"
    last_day = _month_end(date(year, month, 1)).day
    return f"{FIRST_HALF_LAST_DAY + 1}-{last_day} de {month_name} de {year}"
