from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from portfolio_optimizer.portfolio.schemas import Allocation
from portfolio_optimizer.ui.formatting import chart_color


def allocations_frame(allocations: Sequence[Allocation]) -> pd.DataFrame:
    """Flat table of allocations; percentages are scaled to 0-100."""
    rows = [
        {
            "symbol": a.symbol,
            "company": a.company,
            "sector": a.sector,
            "allocation": a.weight * 100,
            "amount": a.amount,
            "expected_return": a.expected_return * 100,
            "risk": a.risk * 100,
        }
        for a in allocations
    ]
    columns = ["symbol", "company", "sector", "allocation", "amount", "expected_return", "risk"]
    return pd.DataFrame(rows, columns=columns)


def allocation_pie(allocations: Sequence[Allocation]) -> go.Figure:
    df = allocations_frame(allocations)
    fig = px.pie(
        df,
        names="symbol",
        values="allocation",
        color="symbol",
        color_discrete_sequence=[chart_color(i) for i in range(len(df))],
        hover_data={"amount": ":$,.0f"},
        title="Allocation by Asset",
    )
    fig.update_traces(textinfo="label+percent", sort=False)
    return fig


def allocation_bar(allocations: Sequence[Allocation]) -> go.Figure:
    df = allocations_frame(allocations)
    long_df = df.melt(
        id_vars="symbol",
        value_vars=["allocation", "expected_return", "risk"],
        var_name="metric",
        value_name="percent",
    )
    long_df["metric"] = long_df["metric"].map(
        {
            "allocation": "Allocation %",
            "expected_return": "Expected Return %",
            "risk": "Risk %",
        }
    )
    fig = px.bar(
        long_df,
        x="symbol",
        y="percent",
        color="metric",
        barmode="group",
        color_discrete_sequence=["#3B82F6", "#10B981", "#F59E0B"],
        title="Allocation vs. Return vs. Risk",
    )
    fig.update_layout(yaxis_title="%", xaxis_title=None, legend_title=None)
    return fig


def build_chart(allocations: Sequence[Allocation], chart_type: str = "pie") -> go.Figure:
    if chart_type == "bar":
        return allocation_bar(allocations)
    if chart_type == "pie":
        return allocation_pie(allocations)
    raise ValueError(f"Unknown chart type: {chart_type}")
