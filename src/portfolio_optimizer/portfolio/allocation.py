# src/portfolio_optimizer/portfolio/allocation.py
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

import numpy as np

from portfolio_optimizer.portfolio.schemas import (
    Allocation,
    OptimizationResult,
)
from portfolio_optimizer.risk.metrics import compute_portfolio_metrics, default_metrics
from portfolio_optimizer.runner.config.models import OptimizerConfig, WeightSettings
from portfolio_optimizer.universe.catalog import get_sector_instruments
from portfolio_optimizer.universe.schemas import Instrument

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Per-sector selection
# ---------------------------------------------------------------------
def select_best_instruments(
    sectors: Sequence[str],
    universe: Optional[Mapping[str, Sequence[Instrument]]] = None,
) -> List[Instrument]:
    """
    Pick the instrument with the highest return/risk ratio in each sector.

    Output order follows `sectors`. Ties go to the first-listed instrument.
    Sectors with no instruments are skipped.
    """
    selected: List[Instrument] = []
    for sector in sectors:
        candidates = get_sector_instruments(sector, universe)
        if not candidates:
            LOGGER.warning("Unknown or empty sector '%s' skipped", sector)
            continue
        # max() keeps the first of equal keys
        selected.append(max(candidates, key=lambda inst: inst.return_to_risk))
    return selected


# ---------------------------------------------------------------------
# Weighting
# ---------------------------------------------------------------------
def assign_weights(
    instruments: Sequence[Instrument],
    settings: WeightSettings | None = None,
) -> np.ndarray:
    """
    Equal weight tilted by return/risk, clipped, then normalized.

        raw_i = clip(1/n + (ratio_i - pivot) * scale, min_w, max_w)
        w_i   = raw_i / sum(raw)
    """
    n = len(instruments)
    if n == 0:
        return np.zeros(0, dtype=float)

    settings = settings or WeightSettings()

    ratios = np.array([inst.return_to_risk for inst in instruments], dtype=float)
    base = 1.0 / n
    raw = base + (ratios - settings.ratio_pivot) * settings.adjustment_scale
    raw = np.clip(raw, settings.min_weight, settings.max_weight)

    total = raw.sum()
    if total <= 0:
        # only reachable with min_weight == 0 and every tilt <= -1/n
        return np.full(n, base)
    return raw / total


# ---------------------------------------------------------------------
# Main entrypoint
# ---------------------------------------------------------------------
def optimize_portfolio(
    budget: float,
    sectors: Sequence[str],
    config: OptimizerConfig | None = None,
) -> OptimizationResult:
    """
    Build a one-instrument-per-sector allocation for `budget`.

    Invalid input (non-positive budget, no known sectors) yields an empty
    result with zero metrics rather than an exception.
    """
    config = config or OptimizerConfig()

    if budget <= 0:
        LOGGER.warning("Ignoring non-positive budget: %s", budget)
        return OptimizationResult(budget=budget, metrics=default_metrics())

    # dedupe, keep order
    sectors = list(dict.fromkeys(sectors))

    instruments = select_best_instruments(sectors, config.universe)
    if not instruments:
        LOGGER.info("No instruments for sectors %s", sectors)
        return OptimizationResult(budget=budget, metrics=default_metrics())

    weights = assign_weights(instruments, config.weights)

    allocations = [
        Allocation(instrument=inst, weight=float(w), amount=float(budget * w))
        for inst, w in zip(instruments, weights)
    ]

    metrics = compute_portfolio_metrics(allocations, config.metrics)

    LOGGER.info(
        "Optimized %d assets: return=%.4f vol=%.4f sharpe=%.4f",
        len(allocations),
        metrics.expected_return,
        metrics.volatility,
        metrics.sharpe_ratio,
    )

    return OptimizationResult(budget=budget, allocations=allocations, metrics=metrics)
