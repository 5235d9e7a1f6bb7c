from portfolio_optimizer.universe.catalog import (
    DEFAULT_UNIVERSE,
    SECTOR_OPTIONS,
    get_sector_instruments,
    get_sector_option,
    list_sectors,
)
from portfolio_optimizer.universe.schemas import Instrument


def test_default_universe_shape():
    assert list_sectors() == [
        "technology",
        "healthcare",
        "finance",
        "energy",
        "consumer",
        "utilities",
        "industrials",
        "materials",
    ]
    assert set(DEFAULT_UNIVERSE) == {opt.value for opt in SECTOR_OPTIONS}

    for sector, instruments in DEFAULT_UNIVERSE.items():
        assert len(instruments) == 4
        assert all(inst.sector == sector for inst in instruments)
        assert all(inst.risk > 0 for inst in instruments)


def test_get_sector_instruments_unknown_is_empty():
    assert get_sector_instruments("crypto") == []


def test_get_sector_instruments_custom_universe():
    custom = {
        "gold": [
            Instrument(
                symbol="GLD", company="Gold Trust", sector="gold",
                expected_return=0.05, risk=0.15,
            )
        ]
    }
    assert [i.symbol for i in get_sector_instruments("gold", custom)] == ["GLD"]
    # built-in sectors are not visible through a custom universe
    assert get_sector_instruments("technology", custom) == []
    assert list_sectors(custom) == ["gold"]


def test_get_sector_option_fallback():
    assert get_sector_option("consumer").label == "Consumer Goods"

    opt = get_sector_option("real_estate")
    assert opt.label == "Real Estate"
    assert opt.color == "#6B7280"
