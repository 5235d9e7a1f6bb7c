from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from portfolio_optimizer.portfolio.schemas import OptimizationRequest
from portfolio_optimizer.runner.config.models import LatencySettings


class BaseLatencyModel(BaseModel, ABC):
    """Abstract base class for latency models.

    A latency model returns a non-negative delay (in seconds) between
    submitting an optimization request and receiving its result.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    @abstractmethod
    def sample_delay(self, request: OptimizationRequest | None = None) -> float:
        """Sample a latency (in seconds) for the given request.

        Parameters
        ----------
        request
            Request being submitted. Unused by the built-in models.

        Returns
        -------
        float
            Non-negative latency in seconds.
        """
        raise NotImplementedError


class FixedLatencyModel(BaseLatencyModel):
    """Deterministic, constant latency model."""

    delay_seconds: float = Field(..., ge=0.0)

    def sample_delay(self, request: OptimizationRequest | None = None) -> float:
        return self.delay_seconds


class UniformLatencyModel(BaseLatencyModel):
    """Latency drawn uniformly from [min_seconds, max_seconds].

    Notes
    -----
    Equal bounds make the model deterministic. Pass a seeded `rng` for a
    reproducible sequence of draws.
    """

    min_seconds: float = Field(..., ge=0.0)
    max_seconds: float = Field(..., ge=0.0)
    rng: np.random.Generator = Field(default_factory=np.random.default_rng, exclude=True)

    @model_validator(mode="after")
    def _check_range(self) -> "UniformLatencyModel":
        if self.min_seconds > self.max_seconds:
            raise ValueError("min_seconds must not exceed max_seconds")
        return self

    def sample_delay(self, request: OptimizationRequest | None = None) -> float:
        if self.min_seconds == self.max_seconds:
            return self.min_seconds
        return float(self.rng.uniform(self.min_seconds, self.max_seconds))


def latency_model_from_settings(
    settings: LatencySettings,
    rng: np.random.Generator | None = None,
) -> BaseLatencyModel:
    if settings.model == "fixed":
        return FixedLatencyModel(delay_seconds=settings.delay_seconds)
    return UniformLatencyModel(
        min_seconds=settings.min_seconds,
        max_seconds=settings.max_seconds,
        rng=rng if rng is not None else np.random.default_rng(),
    )
