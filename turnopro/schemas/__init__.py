from turnopro.schemas.shift import Shift, CompanyItem
from turnopro.schemas.company import CompanySettings, PayrollCycle, PaymentModel
from turnopro.schemas.holiday import HolidayIn, HolidayOut
from turnopro.schemas.payroll import (
    Benefit, Deduction, BreakdownLine, ShiftResult, DaySummary, ExcludedShift,
    PayPeriod, PayrollSummary, PayrollSummaryRequest, ShiftClassifyRequest,
)

__all__ = [
    "Shift", "CompanyItem",
    "CompanySettings", "PayrollCycle", "PaymentModel",
    "HolidayIn", "HolidayOut",
    "Benefit", "Deduction", "BreakdownLine", "ShiftResult", "DaySummary", "ExcludedShift",
    "PayPeriod", "PayrollSummary", "PayrollSummaryRequest", "ShiftClassifyRequest",
]
