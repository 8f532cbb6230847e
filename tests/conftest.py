"""
Shared pytest fixtures for TurnoPro tests.

The engine is pure, so most tests build schemas directly; the HTTP client
fixture runs the FastAPI app in-process via ASGITransport.
"""
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from turnopro.main import app
from turnopro.schemas.company import CompanySettings
from turnopro.schemas.shift import Shift
from turnopro.services.payroll_service import PayrollService
from turnopro.utils.holidays import HolidayCalendar

# Stundensätze in COP, angelehnt an typische Zuschläge
RATES = {
    "day_rate": 10000.0,
    "night_rate": 13500.0,
    "day_overtime_rate": 12500.0,
    "night_overtime_rate": 17500.0,
    "holiday_day_rate": 17500.0,
    "holiday_night_rate": 21000.0,
    "holiday_day_overtime_rate": 20000.0,
    "holiday_night_overtime_rate": 25000.0,
}


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client() -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


# ── Engine fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def company_settings() -> CompanySettings:
    return CompanySettings(
        payroll_cycle="monthly",
        night_shift_start_hour=21,
        daily_hour_limit=8,
        clamp_net_pay=False,
        deductions_include_benefits=True,
        **RATES,
    )


@pytest.fixture
def service() -> PayrollService:
    """Service mit leerem Kalender: nur Sonntage sind Feiertage."""
    return PayrollService(HolidayCalendar())


# ── Helper ────────────────────────────────────────────────────────────────────

_counter = {"n": 0}


def make_shift(
    shift_date: date,
    start: str | None,
    end: str | None,
    user_id: str = "op-1",
    shift_id: str | None = None,
    **kwargs,
) -> Shift:
    if shift_id is None:
        _counter["n"] += 1
        shift_id = f"s-{_counter['n']}"
    return Shift(
        id=shift_id,
        user_id=user_id,
        company_id="co-1",
        date=shift_date,
        start_time=start,
        end_time=end,
        **kwargs,
    )
