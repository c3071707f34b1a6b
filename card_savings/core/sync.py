"""
Keeps the "amount paid off" representations consistent.

The canonical state is the triple (monthlySpend, balanceCarriedPercent, apr).
``balanceCarriedPercent`` is the share of spend *paid off*; the name comes from
the slider label in the calculator UI. Dollar amounts are always derived from
it, and dollar edits are resolved back into it.

Every setter returns a new ``CalculatorInputs``; nothing is mutated.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from card_savings.core.numbers import (
    clamp,
    non_negative,
    percentage,
    round_half_away,
    to_number,
)

EditableField = Literal["monthlySpend", "balanceCarriedPercent", "paidOffBalance", "apr"]


class CalculatorInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    monthlySpend: float = Field(default=2000.0, ge=0)
    balanceCarriedPercent: float = Field(default=50.0, ge=0, le=100)
    apr: float = Field(default=23.0, ge=0)

    @classmethod
    def from_raw(
        cls,
        monthlySpend: Any = 0,
        balanceCarriedPercent: Any = 0,
        apr: Any = 0,
    ) -> "CalculatorInputs":
        """Build inputs from unchecked values, clamping each field into range."""
        return cls(
            monthlySpend=non_negative(monthlySpend),
            balanceCarriedPercent=percentage(balanceCarriedPercent),
            apr=non_negative(apr),
        )

    @property
    def paidOffBalance(self) -> float:
        return paid_off_balance(self)

    @property
    def carriedBalance(self) -> float:
        return carried_balance(self)

    @property
    def annualInterest(self) -> float:
        return annual_interest(self)

    @property
    def monthlySavings(self) -> float:
        return monthly_savings(self)


class DerivedValues(BaseModel):
    model_config = ConfigDict(extra="forbid")

    paidOffBalance: float
    carriedBalance: float
    annualInterest: float
    monthlySavings: float


# ---------- derived scalars ----------


def paid_off_balance(inputs: CalculatorInputs) -> float:
    return inputs.monthlySpend * inputs.balanceCarriedPercent / 100


def carried_balance(inputs: CalculatorInputs) -> float:
    return inputs.monthlySpend - paid_off_balance(inputs)


def annual_interest(inputs: CalculatorInputs) -> float:
    """Yearly interest charged on the carried balance at the given APR."""
    return carried_balance(inputs) * inputs.apr / 100


def monthly_savings(inputs: CalculatorInputs) -> float:
    return annual_interest(inputs) / 12


def derive(inputs: CalculatorInputs) -> DerivedValues:
    return DerivedValues(
        paidOffBalance=paid_off_balance(inputs),
        carriedBalance=carried_balance(inputs),
        annualInterest=annual_interest(inputs),
        monthlySavings=monthly_savings(inputs),
    )


# ---------- edits ----------


def set_monthly_spend(inputs: CalculatorInputs, value: Any) -> CalculatorInputs:
    """Change spend; the paid-off percentage is kept, so dollars scale with it."""
    return inputs.model_copy(update={"monthlySpend": non_negative(value)})


def set_balance_carried_percent(inputs: CalculatorInputs, value: Any) -> CalculatorInputs:
    return inputs.model_copy(update={"balanceCarriedPercent": percentage(value)})


def dollars_to_percent(dollars: Any, monthly_spend: float) -> float:
    """
    Convert a paid-off dollar amount into a whole percentage of spend.

    With zero spend there is nothing to take a share of, so any amount maps
    to 0%.
    """
    if monthly_spend <= 0:
        return 0.0
    ratio = clamp(to_number(dollars) / monthly_spend * 100, 0.0, 100.0)
    return float(round_half_away(ratio))


def set_paid_off_dollar(inputs: CalculatorInputs, value: Any) -> CalculatorInputs:
    percent = dollars_to_percent(value, inputs.monthlySpend)
    return inputs.model_copy(update={"balanceCarriedPercent": percent})


def set_apr(
    inputs: CalculatorInputs,
    value: Any,
    ceiling: Optional[float] = None,
) -> CalculatorInputs:
    """Change the APR. ``ceiling`` is an optional upper cap chosen by the caller."""
    apr = clamp(to_number(value), 0.0, ceiling)
    return inputs.model_copy(update={"apr": apr})


def apply_edit(
    inputs: CalculatorInputs,
    field: EditableField,
    value: Any,
    apr_ceiling: Optional[float] = None,
) -> CalculatorInputs:
    """Route a single-field edit to the matching setter."""
    if field == "monthlySpend":
        return set_monthly_spend(inputs, value)
    if field == "balanceCarriedPercent":
        return set_balance_carried_percent(inputs, value)
    if field == "paidOffBalance":
        return set_paid_off_dollar(inputs, value)
    if field == "apr":
        return set_apr(inputs, value, ceiling=apr_ceiling)
    raise ValueError(f"unknown calculator field: {field}")


__all__ = [
    "CalculatorInputs",
    "DerivedValues",
    "EditableField",
    "paid_off_balance",
    "carried_balance",
    "annual_interest",
    "monthly_savings",
    "derive",
    "set_monthly_spend",
    "set_balance_carried_percent",
    "dollars_to_percent",
    "set_paid_off_dollar",
    "set_apr",
    "apply_edit",
]
