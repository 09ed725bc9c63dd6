import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

# --- Shared Types ---
WeekFormat = Literal["YYYY-WW", "YYYY Week WW"]
PeriodName = Literal["week", "month", "year"]


# --- Envelope ---
class ApiResponse(BaseModel):
    success: bool = True
    data: Any = None
    message: str | None = None


# --- Fiscal Calendar ---
class WeekRangeModel(BaseModel):
    start: datetime.date
    end: datetime.date
    days: int


class FiscalWeekModel(BaseModel):
    fy: int
    ww: int
    code: str
    label: str
    range: WeekRangeModel | None = None


class YearMonthModel(BaseModel):
    yearmonth: str
    label: str


# --- Inspection Numbers ---
class InspectionNumberRequest(BaseModel):
    station: str
    date: datetime.date | None = None
    ww: int | str | None = None
    reserve: bool = True


class InspectionNumberModel(BaseModel):
    inspection_no: str
    station: str
    prefix: str
    running_number: int
    fy: int
    ww: int
    date: datetime.date


# --- Reports ---
class SummaryRequest(BaseModel):
    records: list[dict[str, Any]] = Field(default_factory=list)
    period: PeriodName = "week"
    date_field: str = "date"
    fy: int | None = None


class FilterOptionsRequest(BaseModel):
    records: list[dict[str, Any]] = Field(default_factory=list)
    fy: str | None = None
