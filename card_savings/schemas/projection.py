"""Data contracts for the standalone projection endpoint."""

from typing import List

from pydantic import BaseModel, ConfigDict

from card_savings.core.projection import ProjectionPoint
from card_savings.schemas.calculator import RawNumber


class ProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthlyContribution: RawNumber = 0
    returnRate: RawNumber = None
    timePeriod: RawNumber = None


class ProjectionResponse(BaseModel):
    timePeriod: int
    returnRate: float
    series: List[ProjectionPoint]
    finalValue: int
    totalInvested: float
    totalGains: float
