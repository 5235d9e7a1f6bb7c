"""
Validation for the portfolio configuration form.

Hard validations (block submission):
    - Budget missing, unparsable or non-positive
    - No sector selected

Soft validations (warnings):
    - Budget below the configured minimum
    - Unknown sector keys (skipped by the optimizer)
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from portfolio_optimizer.portfolio.schemas import OptimizationRequest
from portfolio_optimizer.runner.config.models import OptimizerConfig
from portfolio_optimizer.universe.catalog import list_sectors


class ValidationResult:
    """
    Container for validation results:
    - errors: fatal issues (request is not submitted)
    - warnings: soft issues (display but do not stop submission)
    """

    def __init__(self) -> None:
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.request: Optional[OptimizationRequest] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_budget(raw: str | float | None) -> Optional[float]:
    """Parse a budget field; None for blank, unparsable or non-finite input."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = raw.strip().replace(",", "").lstrip("$")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def toggle_sector(selected: Sequence[str], sector: str) -> List[str]:
    """Add `sector` if absent, remove it if present. Order is preserved."""
    if sector in selected:
        return [s for s in selected if s != sector]
    return [*selected, sector]


def can_submit(budget_raw: str | float | None, sectors: Sequence[str], is_loading: bool) -> bool:
    """Whether the optimize button is enabled."""
    if is_loading or not sectors:
        return False
    if isinstance(budget_raw, str):
        return bool(budget_raw.strip())
    return budget_raw is not None


def validate_form(
    budget_raw: str | float | None,
    sectors: Sequence[str],
    config: OptimizerConfig | None = None,
) -> ValidationResult:
    """
    Validate form input and build an OptimizationRequest if it is usable.
    """
    config = config or OptimizerConfig()
    result = ValidationResult()

    # ============================================================
    # HARD VALIDATIONS
    # ============================================================

    budget = parse_budget(budget_raw)
    if budget is None:
        result.errors.append("❌ Enter a numeric investment budget.")
    elif budget <= 0:
        result.errors.append("❌ Budget must be greater than zero.")

    if not sectors:
        result.errors.append("❌ Select at least one sector.")

    if result.errors:
        return result

    # ============================================================
    # SOFT WARNINGS (non-fatal)
    # ============================================================

    if budget < config.form.min_budget:
        result.warnings.append(
            f"⚠️ Budget is below the suggested minimum of ${config.form.min_budget:,.0f}."
        )

    known = set(list_sectors(config.universe))
    unknown = [s for s in sectors if s not in known]
    if unknown:
        result.warnings.append(f"⚠️ Unknown sectors will be skipped → {', '.join(unknown)}")

    result.request = OptimizationRequest(budget=budget, sectors=list(sectors))
    return result
