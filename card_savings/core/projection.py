"""
Compound growth of equal monthly contributions.

The avoided interest is treated as a monthly deposit into an account that
compounds monthly at ``annual_rate_percent / 12``. Values are the future value
of an ordinary annuity (deposit at the end of each month).
"""

from __future__ import annotations

import math
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from card_savings.core.numbers import clamp, non_negative, round_half_away

DEFAULT_TIME_PERIOD = 10
DEFAULT_RETURN_RATE = 9.0
# caps for raw input; final_value itself saturates on overflow
MAX_TIME_PERIOD = 100
MAX_RETURN_RATE = 100.0


class InvestmentInputs(BaseModel):
    """Horizon and return rate; ``None`` means the user cleared the field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timePeriod: Optional[int] = Field(default=DEFAULT_TIME_PERIOD, ge=0)
    returnRate: Optional[float] = Field(default=DEFAULT_RETURN_RATE, ge=0)

    @classmethod
    def from_raw(cls, timePeriod: Any = None, returnRate: Any = None) -> "InvestmentInputs":
        """Clamp raw values; empty input stays ``None`` so the default applies later."""
        return cls(
            timePeriod=None if _is_blank(timePeriod) else int(clamp(non_negative(timePeriod), 0, MAX_TIME_PERIOD)),
            returnRate=None if _is_blank(returnRate) else clamp(non_negative(returnRate), 0, MAX_RETURN_RATE),
        )

    def resolved_years(self, default: int = DEFAULT_TIME_PERIOD) -> int:
        return default if self.timePeriod is None else self.timePeriod

    def resolved_rate(self, default: float = DEFAULT_RETURN_RATE) -> float:
        return default if self.returnRate is None else self.returnRate


class ProjectionPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=0)
    contributed: float
    compoundedValue: float


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def final_value(years: int, annual_rate_percent: float, monthly_contribution: float) -> int:
    """
    Value after ``years`` of monthly contributions, rounded to whole units.

    A zero rate is pure linear accumulation; the annuity formula would divide
    by zero there. Growth too large for a float saturates at the largest
    representable value.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    total_months = years * 12

    if annual_rate_percent == 0 or monthly_rate == 0:
        return round_half_away(monthly_contribution * total_months)

    try:
        growth = ((1 + monthly_rate) ** total_months - 1) / monthly_rate
    except OverflowError:
        growth = math.inf
    if monthly_contribution == 0:
        return 0
    return round_half_away(monthly_contribution * growth)


def contributed(years: int, monthly_contribution: float) -> float:
    """Total deposited after ``years``, without growth."""
    return monthly_contribution * 12 * years


def total_gains(max_years: int, annual_rate_percent: float, monthly_contribution: float) -> float:
    return final_value(max_years, annual_rate_percent, monthly_contribution) - contributed(
        max_years, monthly_contribution
    )


class ProjectionSeries:
    """
    Year-by-year projection for years ``0..max_years`` inclusive.

    Points are computed on iteration, and each iteration starts over from
    year 0.
    """

    def __init__(self, max_years: int, annual_rate_percent: float, monthly_contribution: float):
        self.max_years = max(0, int(max_years))
        self.annual_rate_percent = annual_rate_percent
        self.monthly_contribution = monthly_contribution

    def __iter__(self) -> Iterator[ProjectionPoint]:
        for year in range(self.max_years + 1):
            yield self.point(year)

    def __len__(self) -> int:
        return self.max_years + 1

    def __getitem__(self, year: int) -> ProjectionPoint:
        if year < 0:
            year += len(self)
        if not 0 <= year <= self.max_years:
            raise IndexError(f"year {year} outside 0..{self.max_years}")
        return self.point(year)

    def __repr__(self) -> str:
        return (
            f"ProjectionSeries(max_years={self.max_years}, "
            f"annual_rate_percent={self.annual_rate_percent}, "
            f"monthly_contribution={self.monthly_contribution})"
        )

    def point(self, year: int) -> ProjectionPoint:
        return ProjectionPoint(
            year=year,
            contributed=contributed(year, self.monthly_contribution),
            compoundedValue=final_value(year, self.annual_rate_percent, self.monthly_contribution),
        )

    def to_list(self) -> List[ProjectionPoint]:
        return list(self)

    @property
    def final_value(self) -> int:
        return final_value(self.max_years, self.annual_rate_percent, self.monthly_contribution)

    @property
    def total_invested(self) -> float:
        return contributed(self.max_years, self.monthly_contribution)

    @property
    def total_gains(self) -> float:
        return total_gains(self.max_years, self.annual_rate_percent, self.monthly_contribution)


def series(max_years: int, annual_rate_percent: float, monthly_contribution: float) -> ProjectionSeries:
    return ProjectionSeries(max_years, annual_rate_percent, monthly_contribution)


__all__ = [
    "DEFAULT_TIME_PERIOD",
    "DEFAULT_RETURN_RATE",
    "MAX_TIME_PERIOD",
    "MAX_RETURN_RATE",
    "InvestmentInputs",
    "ProjectionPoint",
    "ProjectionSeries",
    "final_value",
    "contributed",
    "total_gains",
    "series",
]
