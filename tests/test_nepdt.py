# tests/test_nepdt.py

import datetime
import random

import pytest

import bsdual
from bsdual.core.errors import UnsupportedEra
from bsdual.oracles.nepdt import NepaliDatetimeOracle


@pytest.fixture
def oracle():
    return NepaliDatetimeOracle()


def test_known_new_year(oracle):
    # BS 2081 Baisakh 1 == 2024-04-13
    assert oracle.bs_to_ad(2081, 0, 1) == (2024, 3, 13)
    assert oracle.ad_to_bs(2024, 3, 13) == (2081, 0, 1)


def test_known_poush(oracle):
    assert oracle.bs_to_ad(2081, 8, 17) == (2025, 0, 1)
    assert oracle.ad_to_bs(2025, 0, 14) == (2081, 9, 1)  # Maghe Sankranti


def test_month_lengths(oracle):
    assert oracle.days_in_bs_month(2081, 8) == 29
    assert oracle.days_in_bs_month(2081, 2) == 31
    assert oracle.bs_to_ad(2081, 2, 31) == (2024, 6, 15)


def test_weekday_of_first(oracle):
    assert oracle.weekday_of_first(2081, 8, "bs") == 1  # Monday
    assert oracle.weekday_of_first(2025, 0, "ad") == 3  # Wednesday
    assert oracle.weekday_of_first(2024, 8, "ad") == 0  # Sunday


@pytest.mark.parametrize("year", [1900, 2300])
def test_bs_out_of_era(oracle, year):
    with pytest.raises(UnsupportedEra):
        oracle.bs_to_ad(year, 0, 1)
    with pytest.raises(UnsupportedEra):
        oracle.days_in_bs_month(year, 0)


def test_ad_out_of_era(oracle):
    with pytest.raises(UnsupportedEra):
        oracle.ad_to_bs(1800, 0, 1)


def test_year_zero_is_out_of_era(oracle):
    with pytest.raises(UnsupportedEra):
        oracle.ad_to_bs(0, 0, 1)
    with pytest.raises(UnsupportedEra):
        oracle.weekday_of_first(0, 0, "ad")
    with pytest.raises(UnsupportedEra):
        bsdual.init_cursor("0000-01-01", language="en")


def test_now_is_today(oracle):
    now = oracle.now()
    today = datetime.date.today()
    assert now.ad() == (today.year, today.month - 1, today.day)
    assert oracle.bs_to_ad(*now.bs()) == now.ad()


def test_round_trip(oracle):
    random.seed(42)
    for _ in range(500):
        y = random.randint(2000, 2090)
        m = random.randint(0, 11)
        d = random.randint(1, oracle.days_in_bs_month(y, m))
        assert oracle.ad_to_bs(*oracle.bs_to_ad(y, m, d)) == (y, m, d)


def test_default_oracle_is_registered():
    assert bsdual.DEFAULT_ORACLE in bsdual.list_oracles()
    assert bsdual.oracle_info()["name"] == "nepali_datetime"


def test_scenarios_with_default_oracle():
    cur = bsdual.init_cursor("2081-09-17", language="np")
    assert bsdual.format_date(cur.selected, "np", "YYYY/MM/DD") == "२०८१/०९/१७"

    cur = bsdual.init_cursor("2025-01-01", language="en")
    assert bsdual.header_labels(cur).secondary_range == "पौष/माघ २०८१"


def test_unknown_oracle():
    with pytest.raises(bsdual.OracleUnavailableError):
        bsdual.init_cursor("2081-09-17", oracle="missing")
