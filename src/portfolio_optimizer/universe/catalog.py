# src/portfolio_optimizer/universe/catalog.py
"""
Static instrument universe.

Four representative instruments per sector with hand-picked annual
expected return / volatility figures. This is mock data: no market feed
is queried.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from portfolio_optimizer.universe.schemas import Instrument, SectorOption


# (symbol, company, expected_return, risk, correlation)
_RAW_UNIVERSE: Dict[str, List[tuple]] = {
    "technology": [
        ("AAPL", "Apple Inc.", 0.12, 0.22, 0.7),
        ("GOOGL", "Alphabet Inc.", 0.14, 0.25, 0.8),
        ("MSFT", "Microsoft Corporation", 0.13, 0.20, 0.75),
        ("NVDA", "NVIDIA Corporation", 0.18, 0.35, 0.6),
    ],
    "healthcare": [
        ("JNJ", "Johnson & Johnson", 0.08, 0.15, 0.3),
        ("PFE", "Pfizer Inc.", 0.09, 0.18, 0.4),
        ("UNH", "UnitedHealth Group", 0.11, 0.16, 0.35),
        ("ABBV", "AbbVie Inc.", 0.10, 0.17, 0.4),
    ],
    "finance": [
        ("JPM", "JPMorgan Chase & Co.", 0.10, 0.25, 0.6),
        ("BAC", "Bank of America Corp.", 0.09, 0.28, 0.65),
        ("WFC", "Wells Fargo & Company", 0.08, 0.30, 0.7),
        ("GS", "Goldman Sachs Group", 0.12, 0.32, 0.55),
    ],
    "energy": [
        ("XOM", "Exxon Mobil Corporation", 0.07, 0.35, 0.5),
        ("CVX", "Chevron Corporation", 0.08, 0.32, 0.6),
        ("COP", "ConocoPhillips", 0.09, 0.38, 0.55),
        ("EOG", "EOG Resources Inc.", 0.10, 0.40, 0.5),
    ],
    "consumer": [
        ("AMZN", "Amazon.com Inc.", 0.15, 0.28, 0.4),
        ("TSLA", "Tesla Inc.", 0.20, 0.45, 0.3),
        ("HD", "Home Depot Inc.", 0.11, 0.18, 0.5),
        ("MCD", "McDonald's Corporation", 0.09, 0.14, 0.2),
    ],
    "utilities": [
        ("NEE", "NextEra Energy Inc.", 0.07, 0.12, 0.2),
        ("DUK", "Duke Energy Corporation", 0.06, 0.14, 0.3),
        ("SO", "Southern Company", 0.05, 0.13, 0.35),
        ("AEP", "American Electric Power", 0.06, 0.15, 0.4),
    ],
    "industrials": [
        ("BA", "Boeing Company", 0.11, 0.30, 0.5),
        ("CAT", "Caterpillar Inc.", 0.10, 0.28, 0.6),
        ("GE", "General Electric Company", 0.08, 0.25, 0.55),
        ("MMM", "3M Company", 0.07, 0.16, 0.4),
    ],
    "materials": [
        ("LIN", "Linde plc", 0.09, 0.20, 0.4),
        ("SHW", "Sherwin-Williams Company", 0.10, 0.22, 0.3),
        ("APD", "Air Products and Chemicals", 0.08, 0.18, 0.35),
        ("ECL", "Ecolab Inc.", 0.09, 0.17, 0.25),
    ],
}

DEFAULT_UNIVERSE: Dict[str, List[Instrument]] = {
    sector: [
        Instrument(
            symbol=symbol,
            company=company,
            sector=sector,
            expected_return=ret,
            risk=risk,
            correlation=corr,
        )
        for symbol, company, ret, risk, corr in rows
    ]
    for sector, rows in _RAW_UNIVERSE.items()
}

SECTOR_OPTIONS: List[SectorOption] = [
    SectorOption(value="technology", label="Technology", icon="💻", color="#3B82F6"),
    SectorOption(value="healthcare", label="Healthcare", icon="🏥", color="#22C55E"),
    SectorOption(value="finance", label="Finance", icon="🏦", color="#A855F7"),
    SectorOption(value="energy", label="Energy", icon="⚡", color="#EAB308"),
    SectorOption(value="consumer", label="Consumer Goods", icon="🛍️", color="#EC4899"),
    SectorOption(value="utilities", label="Utilities", icon="🔧", color="#F97316"),
    SectorOption(value="industrials", label="Industrials", icon="🏭", color="#6366F1"),
    SectorOption(value="materials", label="Materials", icon="⛏️", color="#14B8A6"),
]

_OPTIONS_BY_VALUE = {opt.value: opt for opt in SECTOR_OPTIONS}


def list_sectors(universe: Optional[Mapping[str, Sequence[Instrument]]] = None) -> List[str]:
    """Sector keys in display order."""
    if universe is None:
        return [opt.value for opt in SECTOR_OPTIONS]
    return list(universe.keys())


def get_sector_option(sector: str) -> SectorOption:
    """
    UI metadata for a sector. Sectors from a custom universe without a
    built-in option get a title-cased label and the neutral colour.
    """
    opt = _OPTIONS_BY_VALUE.get(sector)
    if opt is not None:
        return opt
    return SectorOption(value=sector, label=sector.replace("_", " ").title())


def get_sector_instruments(
    sector: str,
    universe: Optional[Mapping[str, Sequence[Instrument]]] = None,
) -> List[Instrument]:
    """Instruments listed under `sector`, or [] if the sector is unknown."""
    table = DEFAULT_UNIVERSE if universe is None else universe
    return list(table.get(sector, []))
