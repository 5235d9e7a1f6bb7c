from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List

import streamlit as st

from portfolio_optimizer.portfolio.schemas import (
    OptimizationRequest,
    OptimizationResult,
    PortfolioMetrics,
)
from portfolio_optimizer.risk.metrics import performance_grade, risk_level
from portfolio_optimizer.runner.config.loader import CONFIG_ENV_VAR, load_config
from portfolio_optimizer.runner.config.models import OptimizerConfig
from portfolio_optimizer.runner.run import run_optimization
from portfolio_optimizer.ui.charts import build_chart
from portfolio_optimizer.ui.form import can_submit, toggle_sector, validate_form
from portfolio_optimizer.ui.formatting import (
    GRADE_COLORS,
    RISK_LEVEL_COLORS,
    diversification_progress,
    format_currency,
    format_percentage,
    format_ratio,
    sector_color,
    sharpe_progress,
)
from portfolio_optimizer.universe.catalog import get_sector_option, list_sectors

LOGGER = logging.getLogger(__name__)


# ============================================================
# Session state
# ============================================================


def _init_state(cfg: OptimizerConfig) -> None:
    defaults = {
        "is_optimizing": False,
        "pending_request": None,
        "result": None,
        "error": None,
        "form_warnings": [],
        "current_budget": 0.0,
        "selected_sectors": list(cfg.form.default_sectors),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _on_sector_toggle(sector: str) -> None:
    st.session_state["selected_sectors"] = toggle_sector(
        st.session_state["selected_sectors"], sector
    )


# ============================================================
# Sidebar: optional config
# ============================================================


def _try_load_config(path: Path) -> OptimizerConfig | None:
    try:
        return load_config(path)
    except (FileNotFoundError, ValueError) as e:
        st.sidebar.error(f"Config error: {e}")
        return None


def sidebar_load_config() -> OptimizerConfig:
    st.sidebar.header("⚙️ Calculator Settings")

    uploaded = st.sidebar.file_uploader(
        "Upload JSON/YAML config (optional)",
        type=["json", "yaml", "yml"],
    )

    if uploaded is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return OptimizerConfig()
        cfg = _try_load_config(Path(env_path))
    else:
        suffix = uploaded.name.split(".")[-1]
        with tempfile.NamedTemporaryFile(delete=False, suffix=f".{suffix}") as tmp:
            tmp.write(uploaded.read())
        tmp_path = Path(tmp.name)
        try:
            cfg = _try_load_config(tmp_path)
        finally:
            tmp_path.unlink(missing_ok=True)

    if cfg is None:
        return OptimizerConfig()

    st.sidebar.success(f"Loaded config '{cfg.name}'.")
    return cfg


# ============================================================
# Sidebar: portfolio configuration form
# ============================================================


def render_input_form(cfg: OptimizerConfig) -> None:
    st.sidebar.header("📈 Portfolio Configuration")
    st.sidebar.caption("Set your investment parameters to optimize your portfolio")

    budget_raw = st.sidebar.text_input(
        "Investment Budget ($)",
        value=f"{cfg.form.default_budget:.0f}",
        placeholder="Enter your budget",
        help=f"Minimum {format_currency(cfg.form.min_budget)}, "
        f"in steps of {format_currency(cfg.form.budget_step)}.",
        key="budget_input",
    )

    st.sidebar.markdown("**Investment Sectors**")
    cols = st.sidebar.columns(2)
    for i, sector in enumerate(list_sectors(cfg.universe)):
        opt = get_sector_option(sector)
        cols[i % 2].checkbox(
            f"{opt.icon} {opt.label}".strip(),
            value=sector in st.session_state["selected_sectors"],
            key=f"sector_{sector}",
            on_change=_on_sector_toggle,
            args=(sector,),
        )

    selected: List[str] = st.session_state["selected_sectors"]
    enabled = can_submit(budget_raw, selected, st.session_state["is_optimizing"])

    st.sidebar.button(
        "Optimize Portfolio",
        type="primary",
        disabled=not enabled,
        on_click=_on_optimize_click,
        args=(cfg,),
    )
    for msg in st.session_state["form_warnings"]:
        st.sidebar.warning(msg)


def _on_optimize_click(cfg: OptimizerConfig) -> None:
    """Queue a validated request; the run that follows draws the button disabled."""
    validation = validate_form(
        st.session_state["budget_input"], st.session_state["selected_sectors"], cfg
    )
    st.session_state["form_warnings"] = validation.warnings

    # invalid input is ignored, nothing is submitted
    if not validation.ok or validation.request is None:
        LOGGER.info("Form input ignored: %s", validation.errors)
        return

    st.session_state["pending_request"] = validation.request
    st.session_state["is_optimizing"] = True
    st.session_state["current_budget"] = validation.request.budget
    st.session_state["error"] = None


def process_pending_request(cfg: OptimizerConfig) -> None:
    request: OptimizationRequest | None = st.session_state["pending_request"]
    if request is None:
        return
    st.session_state["pending_request"] = None

    try:
        with st.spinner("Optimizing Portfolio…"):
            result = run_optimization(request.budget, request.sectors, cfg)
        st.session_state["result"] = result
    except Exception as e:
        LOGGER.exception("Optimization failed")
        st.session_state["error"] = f"Optimization failed: {e}"
    finally:
        st.session_state["is_optimizing"] = False

    # redraw so the button is enabled again
    st.rerun()


# ============================================================
# Results: allocation list
# ============================================================


def render_allocation(result: OptimizationResult | None, total_budget: float) -> None:
    with st.container(border=True):
        st.subheader("🥧 Portfolio Allocation")
        st.caption(f"Suggested distribution for {format_currency(total_budget)} investment")

        if result is None or result.is_empty:
            st.info("Configure your portfolio to see allocations")
            return

        for alloc in result.allocations:
            left, right = st.columns([3, 1])
            left.markdown(f"**{alloc.symbol}** · {alloc.company}")
            right.markdown(
                f"**{format_percentage(alloc.weight)}**  \n{format_currency(alloc.amount)}"
            )
            st.progress(int(round(alloc.weight * 100)))

            label = get_sector_option(alloc.sector).label
            st.markdown(
                f'<span style="background:{sector_color(alloc.sector)};color:white;'
                f'padding:2px 8px;border-radius:8px;font-size:0.8em">{label}</span>'
                f"&nbsp; Return: {format_percentage(alloc.expected_return)}"
                f" · Risk: {format_percentage(alloc.risk)}",
                unsafe_allow_html=True,
            )


# ============================================================
# Results: risk & return metrics
# ============================================================


def render_metrics(metrics: PortfolioMetrics | None) -> None:
    with st.container(border=True):
        st.subheader("🛡️ Risk & Return Analysis")
        st.caption("Portfolio performance metrics and risk assessment")

        if metrics is None:
            st.info("Optimize your portfolio to see risk analysis")
            return

        level = risk_level(metrics.volatility)
        grade = performance_grade(metrics.sharpe_ratio)

        c1, c2 = st.columns(2)
        c1.metric("Expected Return", format_percentage(metrics.expected_return, 2))
        c2.metric("Volatility", format_percentage(metrics.volatility, 2))
        c2.markdown(f":{RISK_LEVEL_COLORS[level]}-background[{level} Risk]")

        st.markdown(
            f"**Sharpe Ratio:** {format_ratio(metrics.sharpe_ratio)} "
            f":{GRADE_COLORS[grade]}-background[{grade}]"
        )
        st.progress(sharpe_progress(metrics.sharpe_ratio))
        st.caption("Risk-adjusted return efficiency")

        st.markdown(f"**Max Drawdown:** {format_percentage(metrics.max_drawdown, 2)}")
        st.caption("Worst-case scenario loss from peak")

        score = diversification_progress(metrics.diversification_score)
        st.markdown(f"**Diversification Score:** {score}/100")
        st.progress(score)
        st.caption("Portfolio risk distribution effectiveness")


# ============================================================
# Results: charts
# ============================================================


def render_chart(result: OptimizationResult | None) -> None:
    with st.container(border=True):
        st.subheader("📊 Portfolio Visualization")
        st.caption("Interactive charts showing your portfolio distribution")

        if result is None or result.is_empty:
            st.info("Optimize your portfolio to see visualization")
            return

        chart_type = st.radio("Chart", ["Pie", "Bar"], horizontal=True, key="chart_type")
        fig = build_chart(result.allocations, chart_type.lower())
        st.plotly_chart(fig)


def render_quick_stats(result: OptimizationResult | None) -> None:
    if result is None or result.is_empty:
        return

    m = result.metrics
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Expected Return", format_percentage(m.expected_return))
    c2.metric("Portfolio Risk", format_percentage(m.volatility))
    c3.metric("Sharpe Ratio", format_ratio(m.sharpe_ratio))
    c4.metric("Assets", len(result.allocations))


# ============================================================
# Main dashboard
# ============================================================


def main() -> None:
    st.set_page_config(page_title="Portfolio Optimizer", layout="wide")
    st.title("📈 Portfolio Optimizer")
    st.markdown("Intelligent portfolio allocation for optimal risk-adjusted returns")

    cfg = sidebar_load_config()
    _init_state(cfg)

    render_input_form(cfg)
    process_pending_request(cfg)

    if st.session_state["error"]:
        st.error(st.session_state["error"])

    result: OptimizationResult | None = st.session_state["result"]

    left, right = st.columns([1, 1])
    with left:
        render_allocation(result, st.session_state["current_budget"])
    with right:
        render_metrics(result.metrics if result is not None else None)

    render_chart(result)
    render_quick_stats(result)


if __name__ == "__main__":
    main()
