from datetime import date as Date

from pydantic import BaseModel


class HolidayIn(BaseModel):
    date: Date
    name: str | None = None


class HolidayOut(BaseModel):
    date: Date
    name: str
