# src/portfolio_optimizer/portfolio/schemas.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_optimizer.universe.schemas import Instrument


class OptimizationRequest(BaseModel):
    """
    Budget + sector selection submitted from the form or CLI.
    """

    model_config = ConfigDict(frozen=True)

    budget: float = Field(..., description="Investment budget in USD.")
    sectors: List[str] = Field(..., description="Selected sector keys, in order.")

    @field_validator("sectors")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        # keep first occurrence, preserve order
        return list(dict.fromkeys(s.strip() for s in v if s.strip()))


class Allocation(BaseModel):
    """
    Weight and dollar amount assigned to a single instrument.
    """

    model_config = ConfigDict(frozen=True)

    instrument: Instrument
    weight: float = Field(..., ge=0.0, le=1.0, description="Portfolio weight.")
    amount: float = Field(..., description="budget * weight.")

    @property
    def symbol(self) -> str:
        return self.instrument.symbol

    @property
    def company(self) -> str:
        return self.instrument.company

    @property
    def sector(self) -> str:
        return self.instrument.sector

    @property
    def expected_return(self) -> float:
        return self.instrument.expected_return

    @property
    def risk(self) -> float:
        return self.instrument.risk


class PortfolioMetrics(BaseModel):
    """
    Summary statistics derived from a weighted allocation list.
    """

    model_config = ConfigDict(frozen=True)

    expected_return: float = Field(0.0, description="sum(w_i * r_i).")
    volatility: float = Field(0.0, description="Adjusted portfolio volatility.")
    sharpe_ratio: float = Field(0.0, description="(return - rf) / volatility.")
    max_drawdown: float = Field(0.0, description="Drawdown estimate from volatility.")
    diversification_score: float = Field(0.0, description="Heuristic score, at most 1.")


class OptimizationResult(BaseModel):
    """
    Output of a single optimization call.
    """

    model_config = ConfigDict(frozen=True)

    budget: float
    allocations: List[Allocation] = Field(default_factory=list)
    metrics: PortfolioMetrics = Field(default_factory=PortfolioMetrics)

    @property
    def is_empty(self) -> bool:
        return not self.allocations

    @property
    def total_weight(self) -> float:
        return float(sum(a.weight for a in self.allocations))
