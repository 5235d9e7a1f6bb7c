from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from portfolio_optimizer.universe.schemas import Instrument


# ============================================================
# Weight assignment
# ============================================================


class WeightSettings(BaseModel):
    """
    Controls the return/risk tilt applied on top of equal weighting.
    """

    model_config = ConfigDict(extra="forbid")

    ratio_pivot: float = Field(
        0.5, description="Return/risk ratio at which no tilt is applied."
    )
    adjustment_scale: float = Field(
        0.1, ge=0.0, description="Weight tilt per unit of return/risk above the pivot."
    )
    min_weight: float = Field(0.05, ge=0.0, le=1.0)
    max_weight: float = Field(0.4, gt=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "WeightSettings":
        if self.min_weight > self.max_weight:
            raise ValueError("min_weight must not exceed max_weight")
        return self


# ============================================================
# Metric constants
# ============================================================


class MetricSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    risk_free_rate: float = 0.03
    correlation_factor: float = Field(
        0.3,
        ge=0.0,
        description="Scale of the sqrt(variance) term added for multi-asset portfolios.",
    )
    drawdown_multiple: float = Field(1.5, ge=0.0)
    sector_universe_size: int = Field(
        8, gt=0, description="Sector count that maps to a full diversification score."
    )
    allocation_variance_penalty: float = Field(5.0, ge=0.0)


# ============================================================
# Simulated latency
# ============================================================


class LatencySettings(BaseModel):
    """
    Artificial delay applied before an optimization result is returned.
    """

    model_config = ConfigDict(extra="forbid")

    model: Literal["uniform", "fixed"] = "uniform"
    min_seconds: float = Field(1.5, ge=0.0)
    max_seconds: float = Field(2.5, ge=0.0)
    delay_seconds: float = Field(
        0.0, ge=0.0, description="Delay used by the fixed model."
    )

    @model_validator(mode="after")
    def _check_range(self) -> "LatencySettings":
        if self.min_seconds > self.max_seconds:
            raise ValueError("min_seconds must not exceed max_seconds")
        return self


# ============================================================
# Form defaults
# ============================================================


class FormSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_budget: float = Field(10_000.0, gt=0.0)
    min_budget: float = Field(100.0, ge=0.0)
    budget_step: float = Field(100.0, gt=0.0)
    default_sectors: List[str] = Field(
        default_factory=lambda: ["technology", "healthcare"]
    )


class RandomSeedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    numpy: Optional[int] = Field(
        default=None,
        description="Seed for the generator that draws the simulated delay.",
    )


# ============================================================
# Top-level OptimizerConfig
# ============================================================


class OptimizerConfig(BaseModel):
    """
    Global configuration for the allocation calculator and dashboard.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "default"

    weights: WeightSettings = Field(default_factory=WeightSettings)
    metrics: MetricSettings = Field(default_factory=MetricSettings)
    latency: LatencySettings = Field(default_factory=LatencySettings)
    form: FormSettings = Field(default_factory=FormSettings)
    seeds: RandomSeedConfig = Field(default_factory=RandomSeedConfig)

    # None -> built-in lookup table
    universe: Optional[Dict[str, List[Instrument]]] = None

    @model_validator(mode="after")
    def _check_universe(self) -> "OptimizerConfig":
        if self.universe is None:
            return self
        for sector, instruments in self.universe.items():
            for inst in instruments:
                if inst.sector != sector:
                    raise ValueError(
                        f"Instrument '{inst.symbol}' is tagged '{inst.sector}' "
                        f"but listed under '{sector}'"
                    )
        return self
