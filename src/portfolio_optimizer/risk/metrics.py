# src/portfolio_optimizer/risk/metrics.py
from __future__ import annotations

from typing import Literal, Sequence

import numpy as np

from portfolio_optimizer.portfolio.schemas import Allocation, PortfolioMetrics
from portfolio_optimizer.runner.config.models import MetricSettings

RiskLevel = Literal["Low", "Medium", "High"]
PerformanceGrade = Literal["Excellent", "Good", "Fair", "Poor"]


def default_metrics() -> PortfolioMetrics:
    return PortfolioMetrics()


def compute_portfolio_metrics(
    allocations: Sequence[Allocation],
    settings: MetricSettings | None = None,
) -> PortfolioMetrics:
    """
    Closed-form summary statistics for a weighted allocation list.

        return     = sum(w_i * r_i)
        variance   = sum(w_i^2 * s_i^2)
        volatility = sqrt(variance + c * sqrt(variance))   (c = 0 for n == 1)
        sharpe     = (return - rf) / volatility
        drawdown   = k * volatility
        diversif.  = min(1, sectors / S * (1 - p * sum((w_i - 1/n)^2)))

    Cross-asset correlation is not modelled; the c * sqrt(variance) term
    is a flat stand-in for it.
    """
    if not allocations:
        return default_metrics()

    settings = settings or MetricSettings()

    w = np.array([a.weight for a in allocations], dtype=float)
    r = np.array([a.expected_return for a in allocations], dtype=float)
    s = np.array([a.risk for a in allocations], dtype=float)
    n = w.size

    expected_return = float(w @ r)

    variance = float(np.sum(w**2 * s**2))
    correlation_adj = settings.correlation_factor * np.sqrt(variance) if n > 1 else 0.0
    volatility = float(np.sqrt(variance + correlation_adj))

    if volatility > 0:
        sharpe = (expected_return - settings.risk_free_rate) / volatility
    else:
        sharpe = 0.0

    max_drawdown = volatility * settings.drawdown_multiple

    unique_sectors = len({a.sector for a in allocations})
    allocation_variance = float(np.sum((w - 1.0 / n) ** 2))
    diversification = min(
        1.0,
        (unique_sectors / settings.sector_universe_size)
        * (1.0 - allocation_variance * settings.allocation_variance_penalty),
    )

    return PortfolioMetrics(
        expected_return=expected_return,
        volatility=volatility,
        sharpe_ratio=float(sharpe),
        max_drawdown=float(max_drawdown),
        diversification_score=float(diversification),
    )


def risk_level(volatility: float) -> RiskLevel:
    if volatility < 0.15:
        return "Low"
    if volatility < 0.25:
        return "Medium"
    return "High"


def performance_grade(sharpe_ratio: float) -> PerformanceGrade:
    if sharpe_ratio > 2:
        return "Excellent"
    if sharpe_ratio > 1:
        return "Good"
    if sharpe_ratio > 0.5:
        return "Fair"
    return "Poor"
