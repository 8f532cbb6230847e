"""
Schemas für Firmeneinstellungen (Abrechnungszyklus, Zuschlagsätze, Policies).
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from turnopro.core.config import settings
from turnopro.schemas.shift import CompanyItem

PayrollCycle = Literal["monthly", "bi-weekly"]
PaymentModel = Literal["hourly", "production"]


def normalize_cycle(value: str) -> str:
    # "fortnightly" stammt aus älteren Datensätzen
    return "bi-weekly" if value == "fortnightly" else value


class CompanySettings(BaseModel):
    payroll_cycle: PayrollCycle = "monthly"
    payment_model: PaymentModel = "hourly"
    night_shift_start_hour: int = Field(default=21, ge=0, le=23)
    daily_hour_limit: float = Field(default=8, ge=0)

    # Stundensätze; nicht gesetzt = 0
    day_rate: Optional[float] = None
    night_rate: Optional[float] = None
    day_overtime_rate: Optional[float] = None
    night_overtime_rate: Optional[float] = None
    holiday_day_rate: Optional[float] = None
    holiday_night_rate: Optional[float] = None
    holiday_day_overtime_rate: Optional[float] = None
    holiday_night_overtime_rate: Optional[float] = None

    items: list[CompanyItem] = []

    # Abo-Gebühr, wird von der Berechnung nicht verwendet
    subscription_fee: Optional[float] = None
    subscription_currency: str = "COP"

    clamp_net_pay: bool = Field(default_factory=lambda: settings.PAYROLL_CLAMP_NET_PAY)
    deductions_include_benefits: bool = Field(
        default_factory=lambda: settings.PAYROLL_DEDUCTIONS_INCLUDE_BENEFITS
    )

    @field_validator("payroll_cycle", mode="before")
    @classmethod
    def accept_fortnightly(cls, v):
        return normalize_cycle(v) if isinstance(v, str) else v

    def rate_for(self, bucket: str) -> float:
        return getattr(self, f"{bucket}_rate") or 0.0
