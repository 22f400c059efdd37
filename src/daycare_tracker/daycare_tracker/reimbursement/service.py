from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.clock import month_key, year_of
from ..rates.repository import RateRepository
from ..rates.resolver import RateResolver
from ..users.service import require_uid
from .calculator.base import ReimbursementCalculator
from .calculator.standard_calculator import StandardReimbursementCalculator


@dataclass(frozen=True)
class SummaryRow:
    """Meal counts and money for one month ("YYYY-MM") or one year (int)."""

    key: Union[str, int]
    breakfasts: int
    snacks: int
    lunches: int
    total: float
    rate_year: int


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    monthly: list[SummaryRow]
    annual: list[SummaryRow]


class _Bucket:
    __slots__ = ("breakfasts", "snacks", "lunches", "total", "rate_year")

    def __init__(self):
        self.breakfasts = 0
        self.snacks = 0
        self.lunches = 0
        self.total = 0.0
        self.rate_year = 0

    def add(self, record: AttendanceRecord, amount: float, rate_year: int) -> None:
        self.breakfasts += record.breakfast
        self.snacks += record.snacks
        self.lunches += record.lunch
        self.total += amount
        self.rate_year = rate_year

    def to_row(self, key: Union[str, int]) -> SummaryRow:
        # Round once, at output; accumulation stays unrounded.
        return SummaryRow(
            key=key,
            breakfasts=self.breakfasts,
            snacks=self.snacks,
            lunches=self.lunches,
            total=round(self.total, 2),
            rate_year=self.rate_year,
        )


def aggregate(
    records: Iterable[AttendanceRecord],
    resolver: RateResolver,
    *,
    calculator: Optional[ReimbursementCalculator] = None,
) -> ReportData:
    """Fold records into per-record rows plus monthly and annual summaries."""

    calculator = calculator or StandardReimbursementCalculator()
    monthly: dict[str, _Bucket] = {}
    annual: dict[int, _Bucket] = {}
    rows: list[dict] = []

    for r in records:
        year = year_of(r.date)
        rates = resolver.resolve(year)
        amount = calculator.amount(r, rates)

        rows.append(
            {
                "date": r.date,
                "child_id": r.child_id,
                "child_name": r.child_name,
                "in_time": r.in_time,
                "out_time": r.out_time,
                "breakfast": r.breakfast,
                "am_snack": r.am_snack,
                "lunch": r.lunch,
                "pm_snack": r.pm_snack,
                "snacks": r.snacks,
                "amount": round(amount, 2),
                "provenance": r.provenance.value,
                "edited_by": r.edited_by,
                "edit_reason": r.edit_reason,
                "updated_at": r.updated_at,
            }
        )

        monthly.setdefault(month_key(r.date), _Bucket()).add(r, amount, rates.year)
        annual.setdefault(year, _Bucket()).add(r, amount, rates.year)

    return ReportData(
        rows=rows,
        monthly=[monthly[k].to_row(k) for k in sorted(monthly)],
        annual=[annual[k].to_row(k) for k in sorted(annual)],
    )


class ReimbursementReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        rates: RateRepository,
        *,
        calculator: Optional[ReimbursementCalculator] = None,
    ):
        self._attendance = attendance
        self._rates = rates
        self._calculator = calculator or StandardReimbursementCalculator()

    def build_report(self, uid: Optional[str]) -> ReportData:
        uid = require_uid(uid)
        records = self._attendance.list_all(uid)
        resolver = RateResolver(self._rates.list_all(uid))
        return aggregate(records, resolver, calculator=self._calculator)

    def build_day_rows(self, uid: Optional[str], day: str) -> list[dict]:
        uid = require_uid(uid)
        resolver = RateResolver(self._rates.list_all(uid))
        return aggregate(self._attendance.list_for_date(uid, day), resolver, calculator=self._calculator).rows
