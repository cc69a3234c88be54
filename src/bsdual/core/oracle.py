from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple

from .errors import OracleUnavailableError
from .time import days_in_ad_month
from .types import DualDate

logger = logging.getLogger(__name__)

class CalendarOracle(Protocol):
    """Conversion authority between BS and AD. All months are 0-based."""
    def info(self) -> Dict[str, Any]: ...
    def bs_to_ad(self, year: int, month: int, day: int) -> Tuple[int, int, int]: ...
    def ad_to_bs(self, year: int, month: int, day: int) -> Tuple[int, int, int]: ...
    def days_in_bs_month(self, year: int, month: int) -> int: ...
    def weekday_of_first(self, year: int, month: int, calendar: str) -> int: ...
    def now(self) -> DualDate: ...

@dataclass
class OracleRegistry:
    _oracles: Dict[str, CalendarOracle]

    def get(self, name: str) -> CalendarOracle:
        if name not in self._oracles:
            raise OracleUnavailableError(f"Unknown oracle '{name}'. Available: {sorted(self._oracles)}")
        return self._oracles[name]

    def list(self) -> List[str]:
        return sorted(self._oracles.keys())

    def register(self, name: str, oracle: CalendarOracle, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._oracles):
            raise KeyError(f"Oracle '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering oracle %r", name)
        self._oracles[name] = oracle

def days_in_month(oracle: CalendarOracle, calendar: str, year: int, month: int) -> int:
    if calendar == "bs":
        return oracle.days_in_bs_month(year, month)
    return days_in_ad_month(year, month)

def convert(oracle: CalendarOracle, calendar: str, year: int, month: int, day: int) -> DualDate:
    """Build the DualDate for a concrete day given in `calendar`."""
    if calendar == "bs":
        ay, am, ad = oracle.bs_to_ad(year, month, day)
        return DualDate(year, month, day, ay, am, ad)
    by, bm, bd = oracle.ad_to_bs(year, month, day)
    return DualDate(by, bm, bd, year, month, day)
