from pathlib import Path

from portfolio_optimizer.portfolio.allocation import optimize_portfolio
from portfolio_optimizer.portfolio.schemas import OptimizationResult
from portfolio_optimizer.reporting.html_report import generate_html_report


def test_generate_html_report(tmp_path: Path):
    result = optimize_portfolio(10_000, ["technology", "healthcare"])
    out = generate_html_report(result, tmp_path / "report.html")

    html = out.read_text()
    assert "Suggested distribution for $10,000 investment" in html
    assert "MSFT" in html and "UNH" in html
    assert "$5,000" in html
    assert "12.00%" in html  # expected return
    assert "25/100" in html  # diversification


def test_generate_html_report_empty(tmp_path: Path):
    out = generate_html_report(OptimizationResult(budget=0.0), tmp_path / "empty.html")
    assert "No allocations." in out.read_text()


def test_report_diversification_matches_dashboard(tmp_path: Path):
    # 4 sectors score 49.67 -> shown as 50 on every surface
    result = optimize_portfolio(10_000, ["technology", "healthcare", "finance", "energy"])
    html = generate_html_report(result, tmp_path / "four.html").read_text()
    assert "<td>50/100</td>" in html
