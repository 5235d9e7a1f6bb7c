# tests/portfolio/test_schemas.py
import pytest
from pydantic import ValidationError

from portfolio_optimizer.portfolio.schemas import (
    Allocation,
    OptimizationRequest,
    OptimizationResult,
    PortfolioMetrics,
)
from portfolio_optimizer.universe.schemas import Instrument


def _instrument() -> Instrument:
    return Instrument(
        symbol="AAPL",
        company="Apple Inc.",
        sector="technology",
        expected_return=0.12,
        risk=0.22,
        correlation=0.7,
    )


def test_allocation_exposes_instrument_fields():
    alloc = Allocation(instrument=_instrument(), weight=0.6, amount=6000.0)

    assert alloc.symbol == "AAPL"
    assert alloc.company == "Apple Inc."
    assert alloc.sector == "technology"
    assert alloc.expected_return == pytest.approx(0.12)
    assert alloc.risk == pytest.approx(0.22)


def test_models_are_immutable():
    alloc = Allocation(instrument=_instrument(), weight=0.6, amount=6000.0)
    with pytest.raises(ValidationError):
        alloc.weight = 0.5

    with pytest.raises(ValidationError):
        _instrument().risk = 0.1


def test_instrument_rejects_non_positive_risk():
    with pytest.raises(ValidationError):
        Instrument(symbol="X", company="X", sector="s", expected_return=0.1, risk=0.0)


def test_request_dedupes_sectors_in_order():
    req = OptimizationRequest(
        budget=1000, sectors=["energy", "technology", "energy", " ", "finance "]
    )
    assert req.sectors == ["energy", "technology", "finance"]


def test_empty_result_defaults():
    res = OptimizationResult(budget=1000.0)
    assert res.is_empty
    assert res.total_weight == 0.0
    assert res.metrics == PortfolioMetrics()
