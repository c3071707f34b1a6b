"""Data contracts for the calculator endpoints.

Numeric fields accept numbers or text exactly as typed; out-of-range and
non-numeric values are clamped by the core rather than rejected.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from card_savings.core.projection import InvestmentInputs
from card_savings.core.sync import CalculatorInputs, DerivedValues, EditableField

RawNumber = Optional[Union[float, str]]


class RawCalculatorInputs(BaseModel):
    """Calculator inputs as received from the client."""

    model_config = ConfigDict(extra="forbid")

    monthlySpend: RawNumber = 0
    balanceCarriedPercent: RawNumber = 0
    apr: RawNumber = 0

    def to_inputs(self) -> CalculatorInputs:
        return CalculatorInputs.from_raw(
            monthlySpend=self.monthlySpend,
            balanceCarriedPercent=self.balanceCarriedPercent,
            apr=self.apr,
        )


class RawInvestmentInputs(BaseModel):
    """Investment inputs as received; null or blank means "use the default"."""

    model_config = ConfigDict(extra="forbid")

    timePeriod: RawNumber = None
    returnRate: RawNumber = None

    def to_inputs(self) -> InvestmentInputs:
        return InvestmentInputs.from_raw(timePeriod=self.timePeriod, returnRate=self.returnRate)


class EditRequest(BaseModel):
    """One field edit applied on top of the current inputs."""

    model_config = ConfigDict(extra="forbid")

    inputs: RawCalculatorInputs = Field(default_factory=RawCalculatorInputs)
    field: EditableField
    value: Any = None


class EditResponse(BaseModel):
    inputs: CalculatorInputs
    derived: DerivedValues


class SummaryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inputs: RawCalculatorInputs = Field(default_factory=RawCalculatorInputs)
    investment: RawInvestmentInputs = Field(default_factory=RawInvestmentInputs)


class DefaultsResponse(BaseModel):
    inputs: CalculatorInputs
    investment: InvestmentInputs
