"""
Static reference data for UK electricity distribution.

Grid Supply Points:
  https://en.wikipedia.org/wiki/Meter_Point_Administration_Number#Distributor_ID
Profile classes:
  https://en.wikipedia.org/wiki/Meter_Point_Administration_Number#Profile_Class_(PC)
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class GridSupplyPoint:
    id: int
    name: str
    operator: str
    phone_number: str
    participant_id: str
    group_id: str  # key used by the API, e.g. '_A'


GRID_SUPPLY_POINTS: Tuple[GridSupplyPoint, ...] = (
    GridSupplyPoint(10, "Eastern England", "UK Power Networks", "0800 029 4285", "EELC", "_A"),
    GridSupplyPoint(11, "East Midlands", "Western Power Distribution", "0800 096 3080", "EMEB", "_B"),
    GridSupplyPoint(12, "London", "UK Power Networks", "0800 029 4285", "LOND", "_C"),
    GridSupplyPoint(13, "Merseyside and Northern Wales", "SP Energy Networks", "0330 10 10 444", "MANW", "_D"),
    GridSupplyPoint(14, "West Midlands", "Western Power Distribution", "0800 096 3080", "MIDE", "_E"),
    GridSupplyPoint(15, "North Eastern England", "Northern Powergrid", "0800 011 3332", "NEEB", "_F"),
    GridSupplyPoint(16, "North Western England", "Electricity North West", "0800 048 1820", "NORW", "_G"),
    GridSupplyPoint(17, "Northern Scotland", "Scottish & Southern Electricity Networks", "0800 048 3516", "HYDE", "_P"),
    GridSupplyPoint(18, "Southern Scotland", "SP Energy Networks", "0330 10 10 444", "SPOW", "_N"),
    GridSupplyPoint(19, "South Eastern England", "UK Power Networks", "0800 029 4285", "SEEB", "_J"),
    GridSupplyPoint(20, "Southern England", "Scottish & Southern Electricity Networks", "0800 048 3516", "SOUT", "_H"),
    GridSupplyPoint(21, "Southern Wales", "Western Power Distribution", "0800 096 3080", "SWAE", "_K"),
    GridSupplyPoint(22, "South Western England", "Western Power Distribution", "0800 096 3080", "SWEB", "_L"),
    GridSupplyPoint(23, "Yorkshire", "Northern Powergrid", "0800 011 3332", "YELG", "_M"),
)

PROFILE_CLASSES: Mapping[int, str] = MappingProxyType({
    0: "Half-hourly supply (import and export)",
    1: "Domestic unrestricted",
    2: "Domestic Economy meter of two or more rates",
    3: "Non-domestic unrestricted",
    4: "Non-domestic Economy 7",
    5: "Non-domestic, with maximum demand (MD) recording capability and with load factor (LF) "
       "less than or equal to 20%",
    6: "Non-domestic, with MD recording capability and with LF less than or equal to 30% and greater than 20%",
    7: "Non-domestic, with MD recording capability and with LF less than or equal to 40% and greater than 30%",
    8: "Non-domestic, with MD recording capability and with LF greater than 40% "
       "(also all non-half-hourly export MSIDs)",
})


def find_grid_supply_point(group_id: Optional[str]) -> Optional[GridSupplyPoint]:
    """Return the table row whose group id matches exactly, or None."""
    for gsp in GRID_SUPPLY_POINTS:
        if gsp.group_id == group_id:
            return gsp
    return None
