from __future__ import annotations
from beatclock.core.oracles import OracleRegistry
from beatclock.oracles.reference import reference_oracles
from beatclock.ephemeris.skyfield_oracles import skyfield_oracles

def build_registry() -> OracleRegistry:
    reg = OracleRegistry()
    reg.register("reference", reference_oracles)
    reg.register("skyfield", skyfield_oracles)
    return reg
