# tests/risk/test_portfolio_metrics.py
import numpy as np
import pytest

from portfolio_optimizer.portfolio.schemas import Allocation, PortfolioMetrics
from portfolio_optimizer.risk.metrics import (
    compute_portfolio_metrics,
    default_metrics,
    performance_grade,
    risk_level,
)
from portfolio_optimizer.runner.config.models import MetricSettings
from portfolio_optimizer.universe.schemas import Instrument


def _alloc(symbol, sector, weight, ret, risk, budget=1000.0):
    inst = Instrument(
        symbol=symbol, company=symbol, sector=sector, expected_return=ret, risk=risk
    )
    return Allocation(instrument=inst, weight=weight, amount=budget * weight)


def test_empty_allocations_give_default_metrics():
    assert compute_portfolio_metrics([]) == default_metrics() == PortfolioMetrics()


def test_single_asset_has_no_correlation_adjustment():
    m = compute_portfolio_metrics([_alloc("MSFT", "technology", 1.0, 0.13, 0.20)])

    assert np.isclose(m.expected_return, 0.13)
    assert np.isclose(m.volatility, 0.20)
    assert np.isclose(m.sharpe_ratio, 0.5)
    assert np.isclose(m.max_drawdown, 0.30)
    assert np.isclose(m.diversification_score, 1 / 8)


def test_multi_asset_closed_form():
    allocs = [
        _alloc("A", "technology", 0.5, 0.10, 0.20),
        _alloc("B", "energy", 0.3, 0.08, 0.30),
        _alloc("C", "energy", 0.2, 0.12, 0.25),
    ]
    m = compute_portfolio_metrics(allocs)

    w = np.array([0.5, 0.3, 0.2])
    r = np.array([0.10, 0.08, 0.12])
    s = np.array([0.20, 0.30, 0.25])

    ret = float(w @ r)
    var = float(np.sum(w**2 * s**2))
    vol = np.sqrt(var + 0.3 * np.sqrt(var))
    alloc_var = float(np.sum((w - 1 / 3) ** 2))

    assert np.isclose(m.expected_return, ret)
    assert np.isclose(m.volatility, vol)
    assert np.isclose(m.sharpe_ratio, (ret - 0.03) / vol)
    assert np.isclose(m.max_drawdown, 1.5 * vol)
    # two unique sectors out of eight
    assert np.isclose(m.diversification_score, (2 / 8) * (1 - 5 * alloc_var))


def test_custom_metric_settings():
    settings = MetricSettings(
        risk_free_rate=0.0,
        correlation_factor=0.0,
        drawdown_multiple=2.0,
        sector_universe_size=2,
    )
    allocs = [
        _alloc("A", "x", 0.5, 0.10, 0.20),
        _alloc("B", "y", 0.5, 0.10, 0.20),
    ]
    m = compute_portfolio_metrics(allocs, settings)

    vol = np.sqrt(2 * 0.25 * 0.04)
    assert np.isclose(m.volatility, vol)
    assert np.isclose(m.sharpe_ratio, 0.10 / vol)
    assert np.isclose(m.max_drawdown, 2 * vol)
    # capped at 1
    assert m.diversification_score == pytest.approx(1.0)


def test_zero_volatility_gives_zero_sharpe():
    # a zero weight leaves nothing at risk
    allocs = [_alloc("A", "x", 0.0, 0.10, 0.20)]
    m = compute_portfolio_metrics(allocs)
    assert m.volatility == 0.0
    assert m.sharpe_ratio == 0.0


@pytest.mark.parametrize(
    "vol, expected",
    [(0.0, "Low"), (0.149, "Low"), (0.15, "Medium"), (0.2499, "Medium"), (0.25, "High")],
)
def test_risk_level_thresholds(vol, expected):
    assert risk_level(vol) == expected


@pytest.mark.parametrize(
    "sharpe, expected",
    [(2.5, "Excellent"), (2.0, "Good"), (1.2, "Good"), (1.0, "Fair"), (0.5, "Poor"), (-1, "Poor")],
)
def test_performance_grade_thresholds(sharpe, expected):
    assert performance_grade(sharpe) == expected
