"""
PayrollService: Lohnberechnung pro Schicht und pro Abrechnungszeitraum.

Jede Minute einer Schicht landet in genau einem von acht Töpfen
{Feiertag|normal} × {Tag|Nacht} × {regulär|Überstunde}. Überstunden zählen
pro Kalendertag über alle Schichten hinweg, in zeitlicher Reihenfolge.
"""
import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable

from turnopro.core.exceptions import InvalidReference, InvalidTimeFormat, MissingConfiguration
from turnopro.schemas.company import CompanySettings
from turnopro.schemas.payroll import (
    BUCKETS,
    Benefit,
    BreakdownLine,
    DaySummary,
    Deduction,
    ExcludedShift,
    PayrollSummary,
    ShiftResult,
)
from turnopro.schemas.shift import Shift
from turnopro.services.period_service import resolve_period
from turnopro.utils.holidays import HolidayCalendar

logger = logging.getLogger(__name__)

NIGHT_END_HOUR = 6  # Nacht endet immer um 06:00
ONE_MINUTE = timedelta(minutes=1)
MINUTES_PER_HOUR = 60


def parse_hhmm(value: str | None, shift_id: str | None = None) -> tuple[int, int]:
    """'HH:MM' → (Stunde, Minute). Stunde 0–23, Minute 0–59."""
    if not value or not isinstance(value, str):
        raise InvalidTimeFormat(value, shift_id)
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() and 1 <= len(p) <= 2 for p in parts):
        raise InvalidTimeFormat(value, shift_id)
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(value, shift_id)
    return hour, minute


def shift_bounds(shift: Shift) -> tuple[datetime, datetime]:
    """Absoluter Start/Ende; Ende <= Start bedeutet Schicht über Mitternacht."""
    h_s, m_s = parse_hhmm(shift.start_time, shift.id)
    h_e, m_e = parse_hhmm(shift.end_time, shift.id)
    start = datetime(shift.date.year, shift.date.month, shift.date.day, h_s, m_s)
    end = datetime(shift.date.year, shift.date.month, shift.date.day, h_e, m_e)
    if end <= start:
        end += timedelta(days=1)
    return start, end


def _bucket(is_holiday: bool, is_night: bool, is_overtime: bool) -> str:
    name = "night" if is_night else "day"
    if is_overtime:
        name += "_overtime"
    if is_holiday:
        name = "holiday_" + name
    return name


def _start_sort_key(shift: Shift) -> tuple[int, str]:
    # Ungültige Startzeiten ans Ende; sie werden ohnehin ausgeschlossen
    try:
        hour, minute = parse_hhmm(shift.start_time)
    except InvalidTimeFormat:
        return 24 * MINUTES_PER_HOUR, shift.id
    return hour * MINUTES_PER_HOUR + minute, shift.id


class PayrollService:

    def __init__(self, calendar: HolidayCalendar | Iterable[date] | None = None):
        if calendar is None:
            calendar = HolidayCalendar()
        elif not isinstance(calendar, HolidayCalendar):
            calendar = HolidayCalendar(calendar)
        self.calendar = calendar

    # ── Einzelne Schicht ─────────────────────────────────────────────────────

    def classify_shift(
        self,
        shift: Shift,
        settings: CompanySettings,
        hours_already_worked_today: float = 0.0,
    ) -> ShiftResult:
        """
        Klassifiziert eine Schicht minutengenau und berechnet den Bruttobetrag.
        hours_already_worked_today: Stunden aus früheren Schichten desselben Tages.
        Wirft InvalidTimeFormat bei fehlerhaften Uhrzeiten.
        """
        if settings.payment_model == "production":
            return self._calc_production(shift, settings)

        start_dt, end_dt = shift_bounds(shift)

        limit_minutes = settings.daily_hour_limit * MINUTES_PER_HOUR
        worked_minutes = hours_already_worked_today * MINUTES_PER_HOUR
        minutes_by_bucket: dict[str, int] = defaultdict(int)

        current = start_dt
        while current < end_dt:
            h = current.hour
            is_night = h >= settings.night_shift_start_hour or h < NIGHT_END_HOUR
            is_holiday = self.calendar.is_holiday(current.date())
            is_overtime = worked_minutes >= limit_minutes

            minutes_by_bucket[_bucket(is_holiday, is_night, is_overtime)] += 1
            worked_minutes += 1
            current += ONE_MINUTE

        values: dict[str, float] = {}
        for b in BUCKETS:
            hours = minutes_by_bucket.get(b, 0) / MINUTES_PER_HOUR
            values[f"{b}_hours"] = hours
            values[f"{b}_pay"] = hours * settings.rate_for(b)

        return ShiftResult(
            shift_id=shift.id,
            date=shift.date,
            is_holiday=self.calendar.is_holiday(shift.date),
            total_hours=(end_dt - start_dt).total_seconds() / 3600,
            total_payment=sum(values[f"{b}_pay"] for b in BUCKETS),
            **values,
        )

    def _calc_production(self, shift: Shift, settings: CompanySettings) -> ShiftResult:
        """Produktionsmodell: Stückpreis × Menge, keine Stundenklassifizierung."""
        total = 0.0
        warnings: list[str] = []
        if shift.item_id and shift.quantity:
            item = next((i for i in settings.items if i.id == shift.item_id), None)
            if item is None:
                logger.warning("Schicht %s: unbekannter Artikel %s", shift.id, shift.item_id)
                warnings.append(f"Schicht {shift.id}: unbekannter Artikel {shift.item_id!r}, Betrag 0")
            else:
                total = item.value * shift.quantity
        return ShiftResult(
            shift_id=shift.id,
            date=shift.date,
            is_holiday=self.calendar.is_holiday(shift.date),
            total_payment=total,
            warnings=warnings,
        )

    # ── Abrechnungszeitraum ──────────────────────────────────────────────────

    def calculate_period_payroll(
        self,
        shifts: Iterable[Shift],
        settings: CompanySettings | None,
        benefits: Iterable[Benefit],
        deductions: Iterable[Deduction],
        user_id: str,
        reference_date: date,
    ) -> PayrollSummary:
        if settings is None:
            raise MissingConfiguration()

        period = resolve_period(reference_date, settings.payroll_cycle)
        summary = PayrollSummary(user_id=user_id, period=period)

        shifts_by_day: dict[date, list[Shift]] = defaultdict(list)
        for shift in shifts:
            if shift.user_id == user_id and period.contains(shift.date):
                shifts_by_day[shift.date].append(shift)

        for day in sorted(shifts_by_day):
            results, excluded = self._calc_day(shifts_by_day[day], settings)
            summary.excluded_shifts.extend(excluded)
            if not results:
                continue
            summary.shifts.extend(results)
            summary.days.append(
                DaySummary(
                    date=day,
                    shift_ids=[r.shift_id for r in results],
                    total_hours=sum(r.total_hours for r in results),
                    total_payment=sum(r.total_payment for r in results),
                )
            )

        for result in summary.shifts:
            for b in BUCKETS:
                setattr(summary, f"{b}_hours", getattr(summary, f"{b}_hours") + getattr(result, f"{b}_hours"))
                setattr(summary, f"{b}_pay", getattr(summary, f"{b}_pay") + getattr(result, f"{b}_pay"))
            summary.total_hours += result.total_hours
            summary.gross_pay += result.total_payment
            summary.warnings.extend(result.warnings)

        summary.days_worked = len(summary.days)
        summary.is_partial = bool(summary.excluded_shifts)

        self._apply_benefits(summary, benefits)
        self._apply_deductions(summary, deductions, settings.deductions_include_benefits)

        net_pay = summary.gross_pay + summary.total_benefits - summary.total_deductions
        if settings.clamp_net_pay:
            net_pay = max(0.0, net_pay)
        elif net_pay < 0:
            summary.warnings.append(f"Negativer Nettolohn: {net_pay:.2f}")
        summary.net_pay = net_pay
        return summary

    def _calc_day(
        self, day_shifts: list[Shift], settings: CompanySettings
    ) -> tuple[list[ShiftResult], list[ExcludedShift]]:
        """Faltet die Schichten eines Tages chronologisch; Überstunden-Kontingent wird weitergereicht."""
        results: list[ShiftResult] = []
        excluded: list[ExcludedShift] = []
        worked_hours = 0.0

        for shift in sorted(day_shifts, key=_start_sort_key):
            try:
                result = self.classify_shift(shift, settings, worked_hours)
            except InvalidTimeFormat as e:
                logger.warning("Schicht %s ausgeschlossen: %s", shift.id, e)
                excluded.append(
                    ExcludedShift(shift_id=shift.id, date=shift.date, code=e.code, reason=str(e))
                )
                continue
            worked_hours += result.total_hours
            results.append(result)

        return results, excluded

    def _apply_benefits(self, summary: PayrollSummary, benefits: Iterable[Benefit]) -> None:
        for benefit in benefits:
            if not benefit.applies(summary.user_id):
                continue
            try:
                amount = self._benefit_amount(benefit, summary)
            except InvalidReference as e:
                logger.warning("Zulage ignoriert: %s", e)
                summary.warnings.append(str(e))
                continue
            summary.benefit_breakdown.append(BreakdownLine(name=benefit.name, value=amount))
            summary.total_benefits += amount

    def _benefit_amount(self, benefit: Benefit, summary: PayrollSummary) -> float:
        if benefit.type == "fixed":
            return benefit.value
        if benefit.type == "percentage":
            return summary.gross_pay * benefit.value / 100
        if benefit.type == "per-hour":
            return benefit.value * summary.total_hours
        raise InvalidReference("Zulage", benefit.name, benefit.type)

    def _apply_deductions(
        self, summary: PayrollSummary, deductions: Iterable[Deduction], include_benefits: bool
    ) -> None:
        base = summary.gross_pay + summary.total_benefits if include_benefits else summary.gross_pay
        for deduction in deductions:
            try:
                amount = self._deduction_amount(deduction, base)
            except InvalidReference as e:
                logger.warning("Abzug ignoriert: %s", e)
                summary.warnings.append(str(e))
                continue
            summary.deduction_breakdown.append(BreakdownLine(name=deduction.name, value=amount))
            summary.total_deductions += amount

    def _deduction_amount(self, deduction: Deduction, base: float) -> float:
        if deduction.type == "fixed":
            return deduction.value
        if deduction.type == "percentage":
            return base * deduction.value / 100
        raise InvalidReference("Abzug", deduction.name, deduction.type)
