from __future__ import annotations

import argparse
import json
import logging
import os
import subprocess
import sys
from pathlib import Path

from portfolio_optimizer import __version__
from portfolio_optimizer.execution.latency import FixedLatencyModel
from portfolio_optimizer.portfolio.schemas import OptimizationResult
from portfolio_optimizer.reporting.html_report import generate_html_report
from portfolio_optimizer.runner.config.loader import CONFIG_ENV_VAR, load_config
from portfolio_optimizer.runner.config.models import OptimizerConfig
from portfolio_optimizer.runner.run import run_optimization
from portfolio_optimizer.ui.formatting import (
    diversification_progress,
    format_currency,
    format_percentage,
)
from portfolio_optimizer.universe.catalog import get_sector_option, list_sectors

LOGGER = logging.getLogger(__name__)


# ============================================================
# Helpers
# ============================================================


def _load(args) -> OptimizerConfig:
    if getattr(args, "config", None):
        return load_config(args.config)
    return OptimizerConfig()


def _parse_sectors(raw: str) -> list[str]:
    return [s.strip().lower() for s in raw.split(",") if s.strip()]


def _optimize(args) -> OptimizationResult:
    cfg = _load(args)
    # the simulated delay only makes sense in the UI
    latency = None if args.simulate_delay else FixedLatencyModel(delay_seconds=0.0)
    return run_optimization(args.budget, _parse_sectors(args.sectors), cfg, latency)


# ============================================================
# Command: optimize
# ============================================================


def cmd_optimize(args):
    result = _optimize(args)

    if args.json:
        print(result.model_dump_json(indent=2))
        return

    if result.is_empty:
        print("[portopt] No allocations (check budget and sectors).")
        return

    print(f"\n===== Allocation for {format_currency(result.budget)} =====")
    for a in result.allocations:
        print(
            f"  {a.symbol:<6} {a.sector:<12} {format_percentage(a.weight):>7} "
            f"{format_currency(a.amount):>12}"
        )

    m = result.metrics
    print("\n========== Metrics ==========")
    print(f"Expected return: {format_percentage(m.expected_return, 2)}")
    print(f"Volatility:      {format_percentage(m.volatility, 2)}")
    print(f"Sharpe:          {m.sharpe_ratio:.4f}")
    print(f"Max drawdown:    {format_percentage(m.max_drawdown, 2)}")
    print(f"Diversification: {diversification_progress(m.diversification_score)}/100")
    print("=============================\n")


# ============================================================
# Command: sectors
# ============================================================


def cmd_sectors(args):
    cfg = _load(args)
    print("[portopt] Available sectors:")
    for sector in list_sectors(cfg.universe):
        opt = get_sector_option(sector)
        print(f"  - {sector} : {opt.label}")


# ============================================================
# Command: report
# ============================================================


def cmd_report(args):
    result = _optimize(args)
    out = generate_html_report(result, args.out)
    print(f"[portopt] Report written to {out}")


# ============================================================
# Command: ui
# ============================================================


def cmd_ui(args):
    app = Path(__file__).parent / "ui" / "streamlit_app.py"
    env = dict(os.environ)
    if args.config:
        env[CONFIG_ENV_VAR] = str(Path(args.config).resolve())
    LOGGER.info("Launching Streamlit app: %s", app)
    subprocess.run(
        [sys.executable, "-m", "streamlit", "run", str(app)], check=True, env=env
    )


# ============================================================
# Command: version
# ============================================================


def cmd_version(args):
    print(__version__)


# ============================================================
# Main CLI
# ============================================================


def _add_optimize_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--budget", type=float, required=True, help="Investment budget (USD)")
    p.add_argument(
        "--sectors", required=True, help="Comma-separated sectors, e.g. technology,energy"
    )
    p.add_argument("--config", default=None, help="Path to config JSON/YAML")
    p.add_argument(
        "--simulate-delay",
        action="store_true",
        help="Apply the configured artificial latency",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portopt")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # optimize
    # ------------------------------------------------------------------
    p_opt = sub.add_parser("optimize", help="Compute an allocation")
    _add_optimize_args(p_opt)
    p_opt.add_argument("--json", action="store_true", help="Print result as JSON")
    p_opt.set_defaults(func=cmd_optimize)

    # ------------------------------------------------------------------
    # sectors
    # ------------------------------------------------------------------
    p_sec = sub.add_parser("sectors", help="List available sectors")
    p_sec.add_argument("--config", default=None, help="Path to config JSON/YAML")
    p_sec.set_defaults(func=cmd_sectors)

    # ------------------------------------------------------------------
    # report
    # ------------------------------------------------------------------
    p_rep = sub.add_parser("report", help="Write an HTML allocation report")
    _add_optimize_args(p_rep)
    p_rep.add_argument("--out", required=True, help="Output HTML path")
    p_rep.set_defaults(func=cmd_report)

    # ------------------------------------------------------------------
    # ui
    # ------------------------------------------------------------------
    p_ui = sub.add_parser("ui", help="Launch the Streamlit dashboard")
    p_ui.add_argument("--config", default=None, help="Config JSON/YAML for the dashboard")
    p_ui.set_defaults(func=cmd_ui)

    # ------------------------------------------------------------------
    # version
    # ------------------------------------------------------------------
    p_ver = sub.add_parser("version", help="Show version")
    p_ver.set_defaults(func=cmd_version)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
