import numpy as np
import pytest

from portfolio_optimizer.portfolio.allocation import optimize_portfolio
from portfolio_optimizer.ui.charts import (
    allocation_bar,
    allocation_pie,
    allocations_frame,
    build_chart,
)
from portfolio_optimizer.ui.formatting import chart_color


@pytest.fixture
def allocations():
    return optimize_portfolio(10_000, ["technology", "finance", "utilities"]).allocations


def test_allocations_frame_scales_to_percent(allocations):
    df = allocations_frame(allocations)

    assert list(df["symbol"]) == ["MSFT", "JPM", "NEE"]
    assert np.isclose(df["allocation"].sum(), 100.0)
    assert np.isclose(df.loc[0, "expected_return"], 13.0)
    assert np.isclose(df.loc[2, "risk"], 12.0)


def test_allocations_frame_empty_has_columns():
    df = allocations_frame([])
    assert df.empty
    assert "allocation" in df.columns


def test_pie_chart(allocations):
    fig = allocation_pie(allocations)
    assert fig.data[0].type == "pie"
    assert list(fig.data[0].labels) == ["MSFT", "JPM", "NEE"]


def test_pie_chart_colours_follow_palette(allocations):
    fig = allocation_pie(allocations)
    assert list(fig.data[0].marker.colors) == [chart_color(i) for i in range(3)]


def test_bar_chart_has_three_series(allocations):
    fig = allocation_bar(allocations)
    assert {trace.name for trace in fig.data} == {
        "Allocation %",
        "Expected Return %",
        "Risk %",
    }
    assert fig.layout.barmode == "group"


def test_build_chart_dispatch(allocations):
    assert build_chart(allocations, "pie").data[0].type == "pie"
    assert build_chart(allocations, "bar").data[0].type == "bar"
    with pytest.raises(ValueError):
        build_chart(allocations, "line")
