from pydantic import BaseModel, Field
from datetime import date as Date, datetime as DateTime
from typing import Optional

from turnopro.schemas.company import CompanySettings, PayrollCycle
from turnopro.schemas.holiday import HolidayIn
from turnopro.schemas.shift import Shift

# {feiertag|normal} × {tag|nacht} × {regulär|überstunde}
BUCKETS = (
    "day",
    "night",
    "day_overtime",
    "night_overtime",
    "holiday_day",
    "holiday_night",
    "holiday_day_overtime",
    "holiday_night_overtime",
)


class Benefit(BaseModel):
    name: str
    type: str  # fixed | percentage | per-hour
    value: float
    applies_to: list[str] = []  # User-IDs; leer = alle

    def applies(self, user_id: str) -> bool:
        return not self.applies_to or user_id in self.applies_to


class Deduction(BaseModel):
    name: str
    type: str  # fixed | percentage
    value: float


class BreakdownLine(BaseModel):
    name: str
    value: float


class PayBreakdown(BaseModel):
    day_hours: float = 0.0
    night_hours: float = 0.0
    day_overtime_hours: float = 0.0
    night_overtime_hours: float = 0.0
    holiday_day_hours: float = 0.0
    holiday_night_hours: float = 0.0
    holiday_day_overtime_hours: float = 0.0
    holiday_night_overtime_hours: float = 0.0

    day_pay: float = 0.0
    night_pay: float = 0.0
    day_overtime_pay: float = 0.0
    night_overtime_pay: float = 0.0
    holiday_day_pay: float = 0.0
    holiday_night_pay: float = 0.0
    holiday_day_overtime_pay: float = 0.0
    holiday_night_overtime_pay: float = 0.0

    def bucket_hours_sum(self) -> float:
        return sum(getattr(self, f"{b}_hours") for b in BUCKETS)


class ShiftResult(PayBreakdown):
    shift_id: str
    date: Date
    is_holiday: bool = False
    total_hours: float = 0.0
    total_payment: float = 0.0
    warnings: list[str] = []


class DaySummary(BaseModel):
    date: Date
    shift_ids: list[str]
    total_hours: float
    total_payment: float


class ExcludedShift(BaseModel):
    shift_id: str
    date: Date
    code: str
    reason: str


class PayPeriod(BaseModel):
    start: Date
    end: Date
    cycle: PayrollCycle
    key: str
    description: str

    def contains(self, value: Date | DateTime) -> bool:
        """Inklusiv; end gilt bis 23:59:59."""
        if isinstance(value, DateTime):
            value = value.date()
        return self.start <= value <= self.end


class PayrollSummary(PayBreakdown):
    user_id: str
    period: PayPeriod
    total_hours: float = 0.0
    gross_pay: float = 0.0
    total_benefits: float = 0.0
    benefit_breakdown: list[BreakdownLine] = []
    total_deductions: float = 0.0
    deduction_breakdown: list[BreakdownLine] = []
    net_pay: float = 0.0
    days_worked: int = 0
    days: list[DaySummary] = []
    shifts: list[ShiftResult] = []
    excluded_shifts: list[ExcludedShift] = []
    warnings: list[str] = []
    is_partial: bool = False  # mind. eine Schicht ausgeschlossen


# ── Request-Schemas (API) ────────────────────────────────────────────────────

class PayrollSummaryRequest(BaseModel):
    user_id: str
    reference_date: Date
    settings: Optional[CompanySettings] = None
    shifts: list[Shift] = []
    holidays: list[HolidayIn] = []
    include_country_holidays: bool = True
    benefits: list[Benefit] = []
    deductions: list[Deduction] = []


class ShiftClassifyRequest(BaseModel):
    shift: Shift
    settings: Optional[CompanySettings] = None
    holidays: list[HolidayIn] = []
    include_country_holidays: bool = True
    hours_already_worked_today: float = Field(default=0.0, ge=0)
