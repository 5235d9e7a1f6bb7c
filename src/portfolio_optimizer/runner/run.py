from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from portfolio_optimizer.execution.latency import (
    BaseLatencyModel,
    latency_model_from_settings,
)
from portfolio_optimizer.portfolio.allocation import optimize_portfolio
from portfolio_optimizer.portfolio.schemas import OptimizationRequest, OptimizationResult
from portfolio_optimizer.runner.config.loader import make_rng
from portfolio_optimizer.runner.config.models import OptimizerConfig

LOGGER = logging.getLogger(__name__)


async def simulate_optimization(
    budget: float,
    sectors: Sequence[str],
    config: OptimizerConfig | None = None,
    latency_model: BaseLatencyModel | None = None,
) -> OptimizationResult:
    """
    Run `optimize_portfolio` behind an artificial network delay.

    The delay comes from `latency_model` if given, otherwise from
    `config.latency`, drawing from a generator seeded by `config.seeds`.
    There is no cancellation or retry.
    """
    config = config or OptimizerConfig()
    request = OptimizationRequest(budget=budget, sectors=list(sectors))

    model = latency_model or latency_model_from_settings(config.latency, make_rng(config))
    delay = model.sample_delay(request)

    LOGGER.info(
        "Optimizing budget=%.2f sectors=%s (simulated delay %.2fs)…",
        request.budget,
        request.sectors,
        delay,
    )
    await asyncio.sleep(delay)

    return optimize_portfolio(request.budget, request.sectors, config)


def run_optimization(
    budget: float,
    sectors: Sequence[str],
    config: OptimizerConfig | None = None,
    latency_model: BaseLatencyModel | None = None,
) -> OptimizationResult:
    """Blocking wrapper around `simulate_optimization` for sync callers."""
    return asyncio.run(
        simulate_optimization(budget, sectors, config, latency_model=latency_model)
    )
