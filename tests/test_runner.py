from __future__ import annotations

import time

import pytest

from portfolio_optimizer.execution.latency import FixedLatencyModel
from portfolio_optimizer.portfolio.allocation import optimize_portfolio
from portfolio_optimizer.runner.config.models import LatencySettings, OptimizerConfig
from portfolio_optimizer.runner.run import run_optimization, simulate_optimization


@pytest.mark.asyncio
async def test_simulate_optimization_matches_direct_call():
    result = await simulate_optimization(
        10_000,
        ["technology", "healthcare"],
        latency_model=FixedLatencyModel(delay_seconds=0.0),
    )
    assert result == optimize_portfolio(10_000, ["technology", "healthcare"])


@pytest.mark.asyncio
async def test_simulate_optimization_uses_config_latency():
    cfg = OptimizerConfig(latency=LatencySettings(model="fixed", delay_seconds=0.05))

    start = time.perf_counter()
    result = await simulate_optimization(5_000, ["energy"], cfg)
    elapsed = time.perf_counter() - start

    assert elapsed >= 0.04
    assert [a.symbol for a in result.allocations] == ["CVX"]


def test_run_optimization_sync_wrapper():
    result = run_optimization(
        1_000,
        ["finance", "crypto"],
        latency_model=FixedLatencyModel(delay_seconds=0.0),
    )
    assert [a.symbol for a in result.allocations] == ["JPM"]
    assert result.budget == 1_000


def test_run_optimization_empty_selection():
    result = run_optimization(1_000, [], latency_model=FixedLatencyModel(delay_seconds=0.0))
    assert result.is_empty


@pytest.mark.asyncio
async def test_seeded_config_gives_reproducible_delay(caplog):
    cfg = OptimizerConfig(
        latency=LatencySettings(min_seconds=0.0, max_seconds=0.01),
        seeds={"numpy": 21},
    )

    with caplog.at_level("INFO", logger="portfolio_optimizer.runner.run"):
        await simulate_optimization(1_000, ["energy"], cfg)
        await simulate_optimization(1_000, ["energy"], cfg)

    delays = [r.args[2] for r in caplog.records if "simulated delay" in r.getMessage()]
    assert len(delays) == 2
    assert delays[0] == delays[1]
    assert 0.0 <= delays[0] <= 0.01
