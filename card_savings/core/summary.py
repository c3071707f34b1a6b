"""Headline figures for one snapshot of calculator and investment inputs."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from card_savings.core.projection import (
    DEFAULT_RETURN_RATE,
    DEFAULT_TIME_PERIOD,
    InvestmentInputs,
    ProjectionPoint,
    series,
)
from card_savings.core.sync import CalculatorInputs, DerivedValues, derive


class CalculatorSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inputs: CalculatorInputs
    derived: DerivedValues
    timePeriod: int
    returnRate: float
    investmentFinalValue: int
    totalInterestSaved: float
    totalInvested: float
    totalGains: float
    # interest avoided over fixed horizons, shown beside the chart
    interestSavedOneYear: float
    interestSavedFiveYears: float
    savingsHorizonYears: int
    interestSavedHorizon: float
    series: List[ProjectionPoint]


def summarize(
    inputs: CalculatorInputs,
    investment: InvestmentInputs,
    default_time_period: int = DEFAULT_TIME_PERIOD,
    default_return_rate: float = DEFAULT_RETURN_RATE,
) -> CalculatorSummary:
    """
    Compute everything the results panel and chart show.

    ``totalInterestSaved`` is the plain sum ``monthlySavings * 12 * years`` and
    is not reconciled with the series totals; the two can differ by rounding.

    The horizon savings figure treats a zero horizon like a cleared one and
    falls back to the default, unlike the projection which keeps zero years.
    """
    derived = derive(inputs)
    years = max(0, investment.resolved_years(default_time_period))
    rate = investment.resolved_rate(default_return_rate)
    savings_years = max(0, investment.timePeriod or default_time_period)

    projection = series(years, rate, derived.monthlySavings)

    return CalculatorSummary(
        inputs=inputs,
        derived=derived,
        timePeriod=years,
        returnRate=rate,
        investmentFinalValue=projection.final_value,
        totalInterestSaved=derived.monthlySavings * 12 * years,
        totalInvested=projection.total_invested,
        totalGains=projection.total_gains,
        interestSavedOneYear=derived.annualInterest,
        interestSavedFiveYears=derived.annualInterest * 5,
        savingsHorizonYears=savings_years,
        interestSavedHorizon=derived.annualInterest * savings_years,
        series=projection.to_list(),
    )
