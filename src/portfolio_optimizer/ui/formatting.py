from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from portfolio_optimizer.universe.catalog import get_sector_option

# Chart palette, cycled by allocation index
CHART_COLORS = [
    "#3B82F6",  # blue
    "#10B981",  # green
    "#8B5CF6",  # purple
    "#F59E0B",  # yellow
    "#EF4444",  # red
    "#F97316",  # orange
    "#6366F1",  # indigo
    "#14B8A6",  # teal
]

RISK_LEVEL_COLORS = {"Low": "green", "Medium": "orange", "High": "red"}
GRADE_COLORS = {"Excellent": "green", "Good": "blue", "Fair": "orange", "Poor": "red"}


def format_currency(amount: float) -> str:
    """USD with no decimals, e.g. 10000 -> '$10,000'. Halves round away from zero."""
    whole = Decimal(abs(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}${int(whole):,}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value * 100:.{decimals}f}%"


def format_ratio(value: float) -> str:
    return f"{value:.2f}"


def chart_color(index: int) -> str:
    return CHART_COLORS[index % len(CHART_COLORS)]


def sector_color(sector: str) -> str:
    return get_sector_option(sector).color


def sharpe_progress(sharpe_ratio: float) -> int:
    """Progress-bar value in [0, 100] for a Sharpe ratio (2.0 -> full bar)."""
    return int(max(0.0, min(sharpe_ratio * 50, 100.0)))


def diversification_progress(score: float) -> int:
    """Score out of 100, halves rounded up, clamped to [0, 100]."""
    return min(100, max(0, math.floor(score * 100 + 0.5)))
