from __future__ import annotations

from pathlib import Path

from portfolio_optimizer.portfolio.schemas import OptimizationResult
from portfolio_optimizer.risk.metrics import performance_grade, risk_level
from portfolio_optimizer.ui.charts import allocations_frame
from portfolio_optimizer.ui.formatting import (
    diversification_progress,
    format_currency,
    format_percentage,
    format_ratio,
)

HTML_TEMPLATE = """
<html>
<head>
<title>Portfolio Report</title>
<style>
body {{ font-family: Arial; margin: 40px; }}
h1 {{ color: #333; }}
table {{ border-collapse: collapse; width: 70%; margin-bottom: 40px; }}
td, th {{ border: 1px solid #ccc; padding: 8px; }}
</style>
</head>
<body>

<h1>Portfolio Report</h1>
<p>Suggested distribution for {budget} investment</p>

<h2>Risk &amp; Return Summary</h2>
<table>
<tr><th>Metric</th><th>Value</th></tr>
<tr><td>Expected Return</td><td>{expected_return}</td></tr>
<tr><td>Volatility</td><td>{volatility} ({risk_level} Risk)</td></tr>
<tr><td>Sharpe Ratio</td><td>{sharpe} ({grade})</td></tr>
<tr><td>Max Drawdown</td><td>{max_dd}</td></tr>
<tr><td>Diversification Score</td><td>{diversification}/100</td></tr>
</table>

<h2>Allocation</h2>
{allocation_table}

</body>
</html>
"""


def generate_html_report(result: OptimizationResult, path: str | Path) -> Path:
    m = result.metrics

    df = allocations_frame(result.allocations)
    if df.empty:
        allocation_table = "<p>No allocations.</p>"
    else:
        df = df.assign(
            allocation=df["allocation"].map(lambda v: f"{v:.1f}%"),
            amount=df["amount"].map(format_currency),
            expected_return=df["expected_return"].map(lambda v: f"{v:.1f}%"),
            risk=df["risk"].map(lambda v: f"{v:.1f}%"),
        )
        allocation_table = df.to_html(index=False)

    html = HTML_TEMPLATE.format(
        budget=format_currency(result.budget),
        expected_return=format_percentage(m.expected_return, 2),
        volatility=format_percentage(m.volatility, 2),
        risk_level=risk_level(m.volatility),
        sharpe=format_ratio(m.sharpe_ratio),
        grade=performance_grade(m.sharpe_ratio),
        max_dd=format_percentage(m.max_drawdown, 2),
        diversification=diversification_progress(m.diversification_score),
        allocation_table=allocation_table,
    )

    path = Path(path)
    path.write_text(html)
    return path
