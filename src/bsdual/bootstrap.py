from __future__ import annotations
from bsdual.core.oracle import OracleRegistry
from bsdual.oracles.nepdt import NepaliDatetimeOracle

def build_registry() -> OracleRegistry:
    return OracleRegistry({"nepali_datetime": NepaliDatetimeOracle()})
