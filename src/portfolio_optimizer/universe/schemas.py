# src/portfolio_optimizer/universe/schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Instrument(BaseModel):
    """
    A single tradable instrument from the lookup universe.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Ticker symbol (e.g. 'AAPL').")
    company: str = Field(..., description="Display name.")
    sector: str = Field(..., description="Sector tag the instrument is bucketed under.")
    expected_return: float = Field(..., description="Annual expected return (fraction).")
    risk: float = Field(..., gt=0.0, description="Annual volatility (fraction).")
    correlation: float = Field(
        0.0,
        description="Correlation hint vs. the market. Carried, not used in metrics.",
    )

    @property
    def return_to_risk(self) -> float:
        return self.expected_return / self.risk


class SectorOption(BaseModel):
    """
    UI metadata for a selectable sector.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    icon: str = ""
    color: str = "#6B7280"
