from pydantic import BaseModel
from datetime import date as Date
from typing import Optional


class Shift(BaseModel):
    """
    Eine erfasste Schicht. start_time/end_time bleiben Strings (HH:MM):
    Ungültige Werte werden erst beim Klassifizieren erkannt, damit der
    Aggregator nur diese eine Schicht ausschließt.
    """
    id: str
    user_id: str
    company_id: str
    date: Date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    item_details: list[str] = []
    notes: Optional[str] = None
    # Produktionsmodell
    item_id: Optional[str] = None
    quantity: Optional[float] = None


class CompanyItem(BaseModel):
    id: str
    name: str
    value: float  # Stückpreis
