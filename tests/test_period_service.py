"""
Tests für Abrechnungszeiträume (Monat / Quincena).
"""
from datetime import date, datetime

import pytest

from turnopro.services.period_service import period_description, period_key, resolve_period


@pytest.mark.parametrize(
    "reference, cycle, start, end",
    [
        (date(2024, 2, 20), "bi-weekly", date(2024, 2, 16), date(2024, 2, 29)),
        (date(2024, 2, 10), "bi-weekly", date(2024, 2, 1), date(2024, 2, 15)),
        (date(2023, 2, 20), "bi-weekly", date(2023, 2, 16), date(2023, 2, 28)),
        (date(2024, 3, 15), "bi-weekly", date(2024, 3, 1), date(2024, 3, 15)),
        (date(2024, 3, 16), "bi-weekly", date(2024, 3, 16), date(2024, 3, 31)),
        (date(2024, 4, 30), "bi-weekly", date(2024, 4, 16), date(2024, 4, 30)),
        (date(2024, 2, 10), "monthly", date(2024, 2, 1), date(2024, 2, 29)),
        (date(2024, 12, 31), "monthly", date(2024, 12, 1), date(2024, 12, 31)),
    ],
)
def test_resolve_period(reference, cycle, start, end):
    period = resolve_period(reference, cycle)
    assert period.start == start
    assert period.end == end


def test_fortnightly_alias():
    period = resolve_period(date(2024, 2, 20), "fortnightly")
    assert period.cycle == "bi-weekly"
    assert period.start == date(2024, 2, 16)


def test_datetime_reference():
    period = resolve_period(datetime(2024, 2, 15, 23, 30), "bi-weekly")
    assert period.end == date(2024, 2, 15)


def test_unknown_cycle():
    with pytest.raises(ValueError):
        resolve_period(date(2024, 2, 1), "weekly")


def test_contains_until_end_of_day():
    period = resolve_period(date(2024, 2, 10), "bi-weekly")
    assert period.contains(datetime(2024, 2, 15, 23, 59, 59))
    assert period.contains(date(2024, 2, 1))
    assert not period.contains(date(2024, 2, 16))


def test_period_key():
    assert period_key(date(2024, 2, 10), "monthly") == "2024-02"
    assert period_key(date(2024, 2, 10), "bi-weekly") == "2024-02-1"
    assert period_key(date(2024, 2, 16), "bi-weekly") == "2024-02-2"


def test_period_description():
    assert period_description("2024-02", "monthly") == "Febrero 2024"
    assert period_description("2024-02-1", "bi-weekly") == "1-15 de febrero de 2024"
    assert period_description("2024-02-2", "bi-weekly") == "16-29 de febrero de 2024"


def test_resolved_period_carries_key_and_description():
    period = resolve_period(date(2024, 2, 20), "bi-weekly")
    assert period.key == "2024-02-2"
    assert period.description == "16-29 de febrero de 2024"
