from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:9002"
    LOG_LEVEL: str = "INFO"

    # Feiertage: ISO-Ländercode für workalendar (Kolumbien als Standard)
    HOLIDAY_COUNTRY: str = "CO"

    # Abrechnungs-Policies (Standardwerte für CompanySettings).
    # Negativer Nettolohn ist erlaubt, solange PAYROLL_CLAMP_NET_PAY nicht gesetzt ist.
    PAYROLL_CLAMP_NET_PAY: bool = False
    # Prozentuale Abzüge auf Brutto + Zulagen (True) oder nur auf Brutto (False)
    PAYROLL_DEDUCTIONS_INCLUDE_BENEFITS: bool = True

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
