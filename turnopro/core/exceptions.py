"""
Typisierte Fehler der Lohnberechnung.

    PayrollError
    +-- InvalidTimeFormat     – eine Schicht, wird im Aggregator abgefangen
    +-- MissingConfiguration  – fehlende Firmeneinstellungen, bricht ab
    +-- InvalidReference      – unbekannter Zulagen-/Abzugstyp, nur Warnung
"""


class PayrollError(Exception):
    """Basis aller Fehler der Lohnberechnung."""

    code: str = "PAYROLL_ERROR"


class InvalidTimeFormat(PayrollError, ValueError):
    code: str = "INVALID_TIME_FORMAT"

    def __init__(self, value: str | None, shift_id: str | None = None):
        self.value = value
        self.shift_id = shift_id
        where = f" (Schicht {shift_id})" if shift_id else ""
        super().__init__(f"Ungültige Uhrzeit {value!r}{where}, erwartet HH:MM")


class MissingConfiguration(PayrollError):
    code: str = "MISSING_CONFIGURATION"

    def __init__(self, detail: str = "Keine Firmeneinstellungen vorhanden"):
        self.detail = detail
        super().__init__(detail)


class InvalidReference(PayrollError):
    code: str = "INVALID_REFERENCE"

    def __init__(self, kind: str, name: str, type_: str):
        self.kind = kind
        self.name = name
        self.type = type_
        super().__init__(f"{kind} {name!r}: unbekannter Typ {type_!r}")
