# tests/conftest.py

import datetime

import pytest

import bsdual
from bsdual.core.errors import UnsupportedEra
from bsdual.core.oracle import convert

# BS month lengths, 2080 Baisakh 1 == 2023-04-14
FAKE_BS_TABLE = {
    2080: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2081: (31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),
}
FAKE_EPOCH_AD = datetime.date(2023, 4, 14)
FAKE_TODAY_AD = datetime.date(2025, 1, 1)


class FakeOracle:
    """Table-driven oracle covering BS 2080-2081 only."""

    def info(self):
        return {"name": "fake", "bs_years": (min(FAKE_BS_TABLE), max(FAKE_BS_TABLE))}

    def days_in_bs_month(self, year, month):
        if year not in FAKE_BS_TABLE:
            raise UnsupportedEra(f"BS {year}")
        return FAKE_BS_TABLE[year][month]

    def bs_to_ad(self, year, month, day):
        offset = sum(sum(FAKE_BS_TABLE[y]) for y in FAKE_BS_TABLE if y < year)
        offset += sum(self.days_in_bs_month(year, m) for m in range(month)) + day - 1
        d = FAKE_EPOCH_AD + datetime.timedelta(days=offset)
        return (d.year, d.month - 1, d.day)

    def ad_to_bs(self, year, month, day):
        left = (datetime.date(year, month + 1, day) - FAKE_EPOCH_AD).days
        if left < 0:
            raise UnsupportedEra(f"AD {year}-{month + 1}-{day}")
        for y, lengths in sorted(FAKE_BS_TABLE.items()):
            for m, n in enumerate(lengths):
                if left < n:
                    return (y, m, left + 1)
                left -= n
        raise UnsupportedEra(f"AD {year}-{month + 1}-{day}")

    def weekday_of_first(self, year, month, calendar):
        if calendar == "bs":
            y, m, d = self.bs_to_ad(year, month, 1)
            return (datetime.date(y, m + 1, d).weekday() + 1) % 7
        return (datetime.date(year, month + 1, 1).weekday() + 1) % 7

    def now(self):
        return convert(self, "ad", FAKE_TODAY_AD.year, FAKE_TODAY_AD.month - 1, FAKE_TODAY_AD.day)


@pytest.fixture(scope="session", autouse=True)
def fake_oracle():
    oracle = FakeOracle()
    bsdual.register_oracle("fake", oracle, overwrite=True)
    return oracle


@pytest.fixture
def poush_np():
    """np cursor on 2081-09-17 (Poush 17 == 2025-01-01)."""
    return bsdual.init_cursor("2081-09-17", language="np", oracle="fake")


@pytest.fixture
def january_en():
    return bsdual.init_cursor("2025-01-01", language="en", oracle="fake")
